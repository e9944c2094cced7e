# -*- coding: utf-8 -*-
"""
Format checks for a parsed person record. Only fields that are set get
checked; every problem adds one warning and one suggestion.
"""

import logging
import re
from datetime import date
from typing import List, Optional, Tuple

from .schemas import ParsedPersonInfo, ValidationResult

logger = logging.getLogger(__name__)

RE_ID_NUMBER = re.compile(r"[A-Z]\d{9}", re.ASCII)
RE_PHONE = re.compile(r"09\d{8}", re.ASCII)
RE_EMAIL = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", re.ASCII)
RE_BIRTHDAY = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

# (warning, suggestion)
ID_NUMBER_ISSUE = ("身分證字號格式可能不正確", "請檢查身分證字號是否為一個英文字母加九個數字")
PHONE_ISSUE = ("手機號碼格式可能不正確", "請檢查手機號碼是否為09開頭的十位數字")
EMAIL_ISSUE = ("Email 格式可能不正確", "請檢查 Email 格式是否正確")
BIRTHDAY_ISSUE = ("生日日期可能不正確", "請檢查生日是否為有效日期且不能是未來日期")


def _birthday_ok(value: str, today: date) -> bool:
    if not RE_BIRTHDAY.fullmatch(value):
        return False
    try:
        born = date.fromisoformat(value)
    except ValueError:
        return False
    return born <= today


def validate(info: ParsedPersonInfo, today: Optional[date] = None) -> ValidationResult:
    today = today or date.today()
    issues: List[Tuple[str, str]] = []

    if info.id_number and not RE_ID_NUMBER.fullmatch(info.id_number):
        issues.append(ID_NUMBER_ISSUE)

    if info.phone and not RE_PHONE.fullmatch(info.phone):
        issues.append(PHONE_ISSUE)

    if info.email and not RE_EMAIL.fullmatch(info.email):
        issues.append(EMAIL_ISSUE)

    if info.birthday and not _birthday_ok(info.birthday, today):
        issues.append(BIRTHDAY_ISSUE)

    for warning, _ in issues:
        logger.debug("validation warning: %s", warning)

    return ValidationResult(
        is_valid=not issues,
        warnings=[w for w, _ in issues],
        suggestions=[s for _, s in issues],
    )
