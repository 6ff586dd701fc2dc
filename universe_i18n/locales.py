"""Recognized locale tags, keyed by their lowercase form."""

from __future__ import annotations

_LOCALE_NAMES: list[tuple[str, str, str]] = [
    ("af", "Afrikaans", "Afrikaans"),
    ("af-ZA", "Afrikaans (South Africa)", "Afrikaans (Suid Afrika)"),
    ("ar", "Arabic", "العربية"),
    ("ar-AE", "Arabic (U.A.E.)", "العربية (الإمارات العربية المتحدة)"),
    ("ar-EG", "Arabic (Egypt)", "العربية (مصر)"),
    ("ar-SA", "Arabic (Saudi Arabia)", "العربية (المملكة العربية السعودية)"),
    ("bg", "Bulgarian", "български"),
    ("bg-BG", "Bulgarian (Bulgaria)", "български (България)"),
    ("ca", "Catalan", "català"),
    ("ca-ES", "Catalan (Catalan)", "català (català)"),
    ("cs", "Czech", "čeština"),
    ("cs-CZ", "Czech (Czech Republic)", "čeština (Česká republika)"),
    ("da", "Danish", "dansk"),
    ("da-DK", "Danish (Denmark)", "dansk (Danmark)"),
    ("de", "German", "Deutsch"),
    ("de-AT", "German (Austria)", "Deutsch (Österreich)"),
    ("de-CH", "German (Switzerland)", "Deutsch (Schweiz)"),
    ("de-DE", "German (Germany)", "Deutsch (Deutschland)"),
    ("el", "Greek", "ελληνικά"),
    ("el-GR", "Greek (Greece)", "ελληνικά (Ελλάδα)"),
    ("en", "English", "English"),
    ("en-AU", "English (Australia)", "English (Australia)"),
    ("en-CA", "English (Canada)", "English (Canada)"),
    ("en-GB", "English (United Kingdom)", "English (United Kingdom)"),
    ("en-IE", "English (Ireland)", "English (Ireland)"),
    ("en-IN", "English (India)", "English (India)"),
    ("en-NZ", "English (New Zealand)", "English (New Zealand)"),
    ("en-US", "English (United States)", "English (United States)"),
    ("en-ZA", "English (South Africa)", "English (South Africa)"),
    ("es", "Spanish", "español"),
    ("es-AR", "Spanish (Argentina)", "Español (Argentina)"),
    ("es-ES", "Spanish (Spain)", "español (España)"),
    ("es-MX", "Spanish (Mexico)", "Español (México)"),
    ("et", "Estonian", "eesti"),
    ("et-EE", "Estonian (Estonia)", "eesti (Eesti)"),
    ("fa", "Persian", "فارسى"),
    ("fa-IR", "Persian", "فارسى (ایران)"),
    ("fi", "Finnish", "suomi"),
    ("fi-FI", "Finnish (Finland)", "suomi (Suomi)"),
    ("fr", "French", "français"),
    ("fr-BE", "French (Belgium)", "français (Belgique)"),
    ("fr-CA", "French (Canada)", "français (Canada)"),
    ("fr-CH", "French (Switzerland)", "français (Suisse)"),
    ("fr-FR", "French (France)", "français (France)"),
    ("he", "Hebrew", "עברית"),
    ("he-IL", "Hebrew (Israel)", "עברית (ישראל)"),
    ("hi", "Hindi", "हिंदी"),
    ("hi-IN", "Hindi (India)", "हिंदी (भारत)"),
    ("hr", "Croatian", "hrvatski"),
    ("hr-HR", "Croatian (Croatia)", "hrvatski (Hrvatska)"),
    ("hu", "Hungarian", "magyar"),
    ("hu-HU", "Hungarian (Hungary)", "magyar (Magyarország)"),
    ("id", "Indonesian", "Bahasa Indonesia"),
    ("id-ID", "Indonesian (Indonesia)", "Bahasa Indonesia (Indonesia)"),
    ("it", "Italian", "italiano"),
    ("it-CH", "Italian (Switzerland)", "italiano (Svizzera)"),
    ("it-IT", "Italian (Italy)", "italiano (Italia)"),
    ("ja", "Japanese", "日本語"),
    ("ja-JP", "Japanese (Japan)", "日本語 (日本)"),
    ("ko", "Korean", "한국어"),
    ("ko-KR", "Korean (Korea)", "한국어 (대한민국)"),
    ("lt", "Lithuanian", "lietuvių"),
    ("lt-LT", "Lithuanian (Lithuania)", "lietuvių (Lietuva)"),
    ("lv", "Latvian", "latviešu"),
    ("lv-LV", "Latvian (Latvia)", "latviešu (Latvija)"),
    ("ms", "Malay", "Bahasa Malaysia"),
    ("ms-MY", "Malay (Malaysia)", "Bahasa Malaysia (Malaysia)"),
    ("nb", "Norwegian (Bokmål)", "norsk (bokmål)"),
    ("nb-NO", "Norwegian, Bokmål (Norway)", "norsk, bokmål (Norge)"),
    ("nl", "Dutch", "Nederlands"),
    ("nl-BE", "Dutch (Belgium)", "Nederlands (België)"),
    ("nl-NL", "Dutch (Netherlands)", "Nederlands (Nederland)"),
    ("pl", "Polish", "polski"),
    ("pl-PL", "Polish (Poland)", "polski (Polska)"),
    ("pt", "Portuguese", "Português"),
    ("pt-BR", "Portuguese (Brazil)", "Português (Brasil)"),
    ("pt-PT", "Portuguese (Portugal)", "português (Portugal)"),
    ("ro", "Romanian", "română"),
    ("ro-RO", "Romanian (Romania)", "română (România)"),
    ("ru", "Russian", "русский"),
    ("ru-RU", "Russian (Russia)", "русский (Россия)"),
    ("sk", "Slovak", "slovenčina"),
    ("sk-SK", "Slovak (Slovakia)", "slovenčina (Slovenská republika)"),
    ("sl", "Slovenian", "slovenski"),
    ("sl-SI", "Slovenian (Slovenia)", "slovenski (Slovenija)"),
    ("sr", "Serbian", "srpski"),
    ("sv", "Swedish", "svenska"),
    ("sv-FI", "Swedish (Finland)", "svenska (Finland)"),
    ("sv-SE", "Swedish (Sweden)", "svenska (Sverige)"),
    ("th", "Thai", "ไทย"),
    ("th-TH", "Thai (Thailand)", "ไทย (ไทย)"),
    ("tr", "Turkish", "Türkçe"),
    ("tr-TR", "Turkish (Turkey)", "Türkçe (Türkiye)"),
    ("uk", "Ukrainian", "українська"),
    ("uk-UA", "Ukrainian (Ukraine)", "українська (Україна)"),
    ("vi", "Vietnamese", "Tiếng Việt"),
    ("vi-VN", "Vietnamese (Vietnam)", "Tiếng Việt (Việt Nam)"),
    ("zh", "Chinese", "中文"),
    ("zh-CN", "Chinese (People's Republic of China)", "中文(中华人民共和国)"),
    ("zh-HK", "Chinese (Hong Kong S.A.R.)", "中文(香港特别行政区)"),
    ("zh-TW", "Chinese (Taiwan)", "中文(台灣)"),
]

LOCALES: dict[str, tuple[str, str, str]] = {tag.lower(): (tag, name, native) for tag, name, native in _LOCALE_NAMES}


def canonical_locale(locale: str) -> str | None:
    """Return the canonical tag for ``locale`` (``en_us`` -> ``en-US``), or None."""
    entry = LOCALES.get(locale.strip().lower().replace("_", "-"))
    return entry[0] if entry else None
