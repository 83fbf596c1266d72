"""Locales the client can be set to."""

from __future__ import annotations

from typing import NamedTuple


class Locale(NamedTuple):
    code: str
    language_name: str
    native_name: str


LOCALES: tuple[Locale, ...] = (
    Locale("id", "Indonesian", "Bahasa Indonesia"),
    Locale("da", "Danish", "Dansk"),
    Locale("de", "German", "Deutsch"),
    Locale("en-GB", "English, UK", "English, UK"),
    Locale("en-US", "English, US", "English, US"),
    Locale("es-ES", "Spanish", "Español"),
    Locale("es-419", "Spanish, LATAM", "Español, LATAM"),
    Locale("fr", "French", "Français"),
    Locale("hr", "Croatian", "Hrvatski"),
    Locale("it", "Italian", "Italiano"),
    Locale("lt", "Lithuanian", "Lietuviškai"),
    Locale("hu", "Hungarian", "Magyar"),
    Locale("nl", "Dutch", "Nederlands"),
    Locale("no", "Norwegian", "Norsk"),
    Locale("pl", "Polish", "Polski"),
    Locale("pt-BR", "Portuguese, Brazilian", "Português do Brasil"),
    Locale("ro", "Romanian, Romania", "Română"),
    Locale("fi", "Finnish", "Suomi"),
    Locale("sv-SE", "Swedish", "Svenska"),
    Locale("vi", "Vietnamese", "Tiếng Việt"),
    Locale("tr", "Turkish", "Türkçe"),
    Locale("cs", "Czech", "Čeština"),
    Locale("el", "Greek", "Ελληνικά"),
    Locale("bg", "Bulgarian", "български"),
    Locale("ru", "Russian", "Русский"),
    Locale("uk", "Ukrainian", "Українська"),
    Locale("hi", "Hindi", "हिन्दी"),
    Locale("th", "Thai", "ไทย"),
    Locale("zh-CN", "Chinese, China", "中文"),
    Locale("ja", "Japanese", "日本語"),
    Locale("zh-TW", "Chinese, Taiwan", "繁體中文"),
    Locale("ko", "Korean", "한국어"),
)

_BY_CODE = {locale.code: locale for locale in LOCALES}


def find_locale(code: str) -> Locale | None:
    """Look up a locale by its code, e.g. ``"en-US"``."""
    return _BY_CODE.get(code)
