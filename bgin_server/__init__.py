"""BGIN multi-agent hub: agent chat with LLM provider fallback and file-based transcripts."""
