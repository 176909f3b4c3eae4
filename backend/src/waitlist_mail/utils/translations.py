"""Message catalogs for email copy."""

from __future__ import annotations

from typing import Mapping
from typing import Optional

TEXT_DOMAIN = "woodmart"

# Non-English translations keyed by domain, then by English message.
_CATALOGS: dict[str, dict[str, dict[str, str]]] = {
    TEXT_DOMAIN: {
        "If you don't want to receive any further notification, please follow this link": {
            "zh": "如果您不想再收到任何通知，請點擊此連結",
        },
        "A product you are waiting for is back in stock": {
            "zh": "您正在等候的產品已重新有貨",
        },
        "Good news! The product you've been waiting for is now back in stock.": {
            "zh": "好消息！您一直在等候的產品現已重新有貨。",
        },
        "Waitlist subscription confirmed": {
            "zh": "候補名單訂閱已確認",
        },
        "You will be notified when product is back in stock": {
            "zh": "產品重新有貨時我們會通知您",
        },
        "Customer": {
            "zh": "顧客",
        },
        "Product image": {
            "zh": "產品圖片",
        },
        "Confirm waitlist subscription": {
            "zh": "確認候補名單訂閱",
        },
        "Get notified when {product_title} back in stock": {
            "zh": "{product_title} 重新有貨時通知我",
        },
        "Confirm now": {
            "zh": "立即確認",
        },
    },
}


def build_translation_map(
    base_value: Optional[str],
    translations: Optional[Mapping[str, str]],
) -> dict[str, str]:
    """Build a language map with English fallback.

    Args:
        base_value: The English message.
        translations: The non-English translation map.

    Returns:
        Language map that always includes English when base_value is present.
    """
    result: dict[str, str] = {}
    if base_value:
        result["en"] = base_value
    if translations:
        for key, value in translations.items():
            if not value:
                continue
            if key == "en":
                continue
            result[key] = value
    return result


def translate(message: str, domain: str = TEXT_DOMAIN, language: str = "en") -> str:
    """Translate an English message, falling back to English.

    Args:
        message: The English message, used as the catalog key.
        domain: Text domain of the catalog.
        language: ISO 639-1 language code.

    Returns:
        The translated message, or the message itself when no translation
        exists for the language.
    """
    translations = _CATALOGS.get(domain, {}).get(message)
    language_map = build_translation_map(message, translations)
    return language_map.get(language, message)
