"""
Question generation provider abstraction.

This module provides a provider pattern for question generation services,
allowing seamless switching between Google (Gemini) and any OpenAI-compatible
custom endpoint.
"""

from .base import QuestionGenerationProvider
from .google_provider import GoogleProvider
from .custom_provider import CustomProvider
from .parsing import extract_questions, normalize_content, parse_sse_aware_json
from .prompts import SYSTEM_INSTRUCTIONS, build_prompt

__all__ = [
    'QuestionGenerationProvider',
    'GoogleProvider',
    'CustomProvider',
    'extract_questions',
    'normalize_content',
    'parse_sse_aware_json',
    'SYSTEM_INSTRUCTIONS',
    'build_prompt',
]
