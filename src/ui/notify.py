"""Transient user notifications (toasts)."""

from typing import Protocol

import streamlit as st


class Notifier(Protocol):
    def success(self, message: str, description: str | None = None) -> None: ...

    def info(self, message: str, description: str | None = None) -> None: ...

    def error(self, message: str, description: str | None = None) -> None: ...


def _text(message: str, description: str | None) -> str:
    return f"{message}: {description}" if description else message


class StreamlitNotifier:
    """Shows notifications as Streamlit toasts."""

    def success(self, message: str, description: str | None = None) -> None:
        st.toast(_text(message, description), icon="✅")

    def info(self, message: str, description: str | None = None) -> None:
        st.toast(_text(message, description), icon="ℹ️")

    def error(self, message: str, description: str | None = None) -> None:
        st.toast(_text(message, description), icon="⚠️")
