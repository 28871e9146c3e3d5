"""ContentPilot - social media content from speech transcripts."""

__version__ = "0.1.0"
