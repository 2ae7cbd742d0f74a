"""Operation services."""

from openai_kit.services.chat_completion import ChatCompletion, first_delta_content

__all__ = ["ChatCompletion", "first_delta_content"]
