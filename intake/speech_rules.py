# -*- coding: utf-8 -*-
"""
Person info rules for speech transcripts (Mandarin, Taiwan intake form):
- Regex precompile, one ordered table per field
- First match wins inside a field, fields never block each other
- Phrase-anchored patterns first, bare shapes last:
    * "我是小明"                 => name=小明
    * "生日是2000年5月3日"       => birthday=2000-05-03
    * "身分證字號是A123456789"   => id_number=A123456789
    * "手機0912345678"           => phone=0912345678
    * "信箱是Foo@Example.com"    => email=foo@example.com
    * "住在台北市大安區"         => city=台北市 district=大安區
- Gender by marker words, male markers checked before female
- Bare fallbacks match the shape anywhere in the text (loose on purpose)
"""

import logging
import re
from typing import Dict, Optional, Pattern, Sequence, Tuple

from .schemas import ParsedPersonInfo

logger = logging.getLogger(__name__)

RULES_VERSION = "2025-06-01.1"

# =========================
# Constants
# =========================
NAME_TOKEN = r"([^，。！？\s]{2,4})"
DATE_SHAPE = r"(\d{4})年?(\d{1,2})月?(\d{1,2})"
ID_SHAPE = r"([A-Z]\d{9})"
PHONE_SHAPE = r"(09\d{8})"
EMAIL_SHAPE = r"([a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})"
CITY_DISTRICT = r"(.{2,}市).*?(.{2,}區)"

MALE_MARKERS = ("男生", "男性", "是男")
FEMALE_MARKERS = ("女生", "女性", "是女")

# =========================
# Precompiled regex
# =========================
RE_BREAKS = re.compile(r"[，。！？\s]+")

# \d stays ASCII so extracted digits are always 0-9
_A = re.ASCII

RE_NAME = (
    re.compile(rf"我是{NAME_TOKEN}", _A),
    re.compile(rf"我叫{NAME_TOKEN}", _A),
    re.compile(rf"名字是{NAME_TOKEN}", _A),
    re.compile(rf"我的名字是{NAME_TOKEN}", _A),
)

RE_BIRTHDAY = (
    re.compile(rf"生日是?{DATE_SHAPE}[日號]?", _A),
    re.compile(rf"出生.*?{DATE_SHAPE}[日號]?", _A),
    re.compile(rf"{DATE_SHAPE}[日號]", _A),
)

RE_ID_NUMBER = (
    re.compile(rf"身分[字號碼]{{1,3}}是?{ID_SHAPE}", _A),
    re.compile(rf"ID.*?{ID_SHAPE}", _A),
    re.compile(ID_SHAPE, _A),
)

RE_PHONE = (
    re.compile(rf"[聯絡電話]{{3,4}}是?{PHONE_SHAPE}", _A),
    re.compile(rf"手機.*?{PHONE_SHAPE}", _A),
    re.compile(rf"電話.*?{PHONE_SHAPE}", _A),
    re.compile(PHONE_SHAPE, _A),
)

RE_EMAIL = (
    re.compile(rf"[eE]?[mM]ail.*?{EMAIL_SHAPE}", _A),
    re.compile(rf"信箱.*?{EMAIL_SHAPE}", _A),
    re.compile(EMAIL_SHAPE, _A),
)

RE_CITY_DISTRICT = (
    re.compile(rf"地址是?{CITY_DISTRICT}", _A),
    re.compile(rf"住在{CITY_DISTRICT}", _A),
    re.compile(CITY_DISTRICT, _A),
)


# =========================
# Helpers
# =========================
def _first_match(patterns: Sequence[Pattern[str]], text: str) -> Optional["re.Match[str]"]:
    for p in patterns:
        m = p.search(text)
        if m:
            return m
    return None


# =========================
# Normalization
# =========================
def normalize_transcript(text: str) -> str:
    if not text:
        return ""
    return RE_BREAKS.sub(" ", str(text)).strip()


# =========================
# Fields
# =========================
def _find_name(text: str) -> Optional[str]:
    m = _first_match(RE_NAME, text)
    return m.group(1) if m else None


def _find_gender(text: str) -> Optional[str]:
    if any(w in text for w in MALE_MARKERS):
        return "Male"
    if any(w in text for w in FEMALE_MARKERS):
        return "Female"
    return None


def _find_birthday(text: str) -> Optional[str]:
    m = _first_match(RE_BIRTHDAY, text)
    if not m:
        return None
    year, month, day = m.groups()
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def _find_id_number(text: str) -> Optional[str]:
    m = _first_match(RE_ID_NUMBER, text)
    return m.group(1) if m else None


def _find_phone(text: str) -> Optional[str]:
    m = _first_match(RE_PHONE, text)
    return m.group(1) if m else None


def _find_email(text: str) -> Optional[str]:
    m = _first_match(RE_EMAIL, text)
    return m.group(1).lower() if m else None


def _find_city_district(text: str) -> Tuple[Optional[str], Optional[str]]:
    m = _first_match(RE_CITY_DISTRICT, text)
    if not m:
        return None, None
    return m.group(1), m.group(2)


# =========================
# Main parse
# =========================
def extract(text: str) -> ParsedPersonInfo:
    norm = normalize_transcript(text)
    logger.debug("parsing transcript: %s", norm)

    fields: Dict[str, Optional[str]] = {
        "name": _find_name(norm),
        "gender": _find_gender(norm),
        "birthday": _find_birthday(norm),
        "id_number": _find_id_number(norm),
        "phone": _find_phone(norm),
        "email": _find_email(norm),
    }
    fields["city"], fields["district"] = _find_city_district(norm)

    found = {k: v for k, v in fields.items() if v}
    for k, v in found.items():
        logger.debug("resolved %s=%s", k, v)

    return ParsedPersonInfo(**found)
