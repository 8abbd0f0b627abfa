"""Centralized message constants for error messages and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Video Validation Errors
    EMPTY_VIDEO_ID = "Video ID cannot be empty"
    INVALID_METADATA = "Payload metadata must be a mapping, got {type_name}"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Remote Sync Errors
    REMOTE_FETCH_FAILED = "Could not fetch remote playlist: {error}"
    REMOTE_PUSH_FAILED = "Could not push playlist changes: {error}"
    REMOTE_SOURCE_NOT_SET = "Remote playlist source not configured. Call set_remote_source() first."


class LogTemplates:
    """Log message templates.

    Use these with logger.info(), logger.debug(), etc. and pass values as
    parameters so formatting stays lazy.
    """

    # Playlist Changes
    PLAYLIST_ADDED = "Added %s to playlist (size=%d, cursor=%d)"
    PLAYLIST_ADD_REJECTED = "Ignored empty video on add"
    PLAYLIST_REMOVED = "Removed %s from playlist (size=%d, cursor=%d)"
    PLAYLIST_REMOVE_SKIPPED = "Skipped removal of %s (%s)"
    PLAYLIST_CURRENT_SET = "Current video is now %s at index %d"
    PLAYLIST_FUTURE_DROPPED = "Dropped %d upcoming videos after index %d"
    PLAYLIST_SESSION_STARTED = "New playlist session, sync boundary at %d"
    PLAYLIST_REFRESHED = "Refreshed stored copy of %s"
    PLAYLIST_CLEARED = "Playlist cleared (%d videos dropped)"
    PLAYLIST_MERGED = "Merged %d remote videos (size=%d)"

    # Navigation
    NAVIGATION_END_REACHED = "No %s video to move to"

    # Reconciliation
    SYNC_STARTED = "Reconciliation started"
    SYNC_COMPLETED = "Reconciliation completed: pulled %d, pushed %d"
    SYNC_PULL_FAILED = "Remote fetch failed: %r"
    SYNC_PUSH_FAILED = "Remote push failed: %r"
    SYNC_NOTHING_TO_PUSH = "No changed videos to push"
    SYNC_LOOP_STARTED = "Reconciliation loop started (every %ds)"
    SYNC_LOOP_STOPPED = "Reconciliation loop stopped"
    SYNC_ALREADY_RUNNING = "Reconciliation loop is already running"

    # Lifecycle
    CONTAINER_PLAYLIST_RESET = "Playlist instance discarded"
    LOGGING_CONFIGURED = "Logging configured at %s"
