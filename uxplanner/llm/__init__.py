"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build prompts that pin the JSON shape of every AI output.
- Rewrite remixed-technique notes into portfolio case studies.
- Generate practical guides for a UX technique.
- Graceful fallback when the LLM is unavailable or returns invalid output.
"""
