"""
Core functionality for the transcript digest application.

This package contains modules for resolving YouTube URLs, acquiring
transcripts, requesting completions and searching captioned videos.
"""
