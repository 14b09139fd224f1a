# SPDX-License-Identifier: MIT
"""Tool descriptions advertised to MCP clients."""

CREATE_VIDEO = """Start a new Sora video generation job. Returns a job object with status (async).

Poll get_video_status(video_id) until status='completed', then download_video(video_id).

Params: prompt, model (sora-2 faster|sora-2-pro quality), size (1280x720|1920x1080|720x1280|1080x1920), seconds ("4"|"8"|"12"), input_reference (optional base64 JPEG/PNG/WEBP first frame, must match size)"""

GET_VIDEO_STATUS = """Retrieve status and progress of a video generation job.

Returns: id, status (queued|in_progress|completed|failed), progress (0-100), model, seconds, size"""

DOWNLOAD_VIDEO = """Download a completed video (MP4), thumbnail (WEBP), or spritesheet (JPEG) as base64. Only works when status='completed'.

Params: video_id, variant (video|thumbnail|spritesheet)

Returns: video_id, variant, size_bytes, data_base64, suggested_filename, note"""

LIST_VIDEOS = """List video jobs with pagination.

Params: limit (1-100, default 10), after (pagination cursor), order (desc|asc)

Returns: data (array), has_more, and the ID cursors to pass as 'after' for the next page"""

DELETE_VIDEO = """Permanently delete a video from OpenAI storage. Cannot be undone.

Params: video_id"""

REMIX_VIDEO = """Create a new video by remixing a completed video with a targeted adjustment. Returns a new job (async).

Keep the prompt focused on a single, well-defined change; structure and composition are preserved.

Params: video_id (must be completed), prompt"""
