"""
LLM module - provider selection for grading and question generation.
"""

from .base import BaseLLM

__all__ = ["BaseLLM", "create_llm", "PROVIDERS"]

# provider name -> (module, class); imported lazily so only the chosen SDK loads
PROVIDERS: dict[str, tuple[str, str]] = {
    "gemini": ("src.services.llm.gemini", "GeminiLLM"),
    "claude": ("src.services.llm.claude", "ClaudeLLM"),
    "ollama": ("src.services.llm.ollama", "OllamaLLM"),
}


def create_llm(provider: str, **kwargs) -> BaseLLM:
    """Instantiate the LLM named by ``settings.llm_provider``.

    Raises:
        ValueError: If *provider* is not one of :data:`PROVIDERS`.
    """
    from importlib import import_module

    try:
        module_name, class_name = PROVIDERS[provider.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown LLM provider: {provider} (expected one of {', '.join(PROVIDERS)})"
        ) from None
    return getattr(import_module(module_name), class_name)(**kwargs)
