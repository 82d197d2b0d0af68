"""Generative text adapter."""

from composer.infrastructure.llm.openai_client import OpenAITextGenerator

__all__ = ["OpenAITextGenerator"]
