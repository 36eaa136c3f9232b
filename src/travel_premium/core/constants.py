"""Domain constants shared by the pricing services."""

from __future__ import annotations

from decimal import Decimal

DOMESTIC_TRAVEL = "국내여행보험"
OVERSEAS_TRAVEL = "해외여행보험"
STUDY_ABROAD = "유학/어학연수"
WORKING_HOLIDAY = "워킹홀리데이"
BUSINESS_ASSIGNMENT = "해외출장/주재원/교환교수"
LONG_STAY = "장기체류보험"

FOREIGN_CURRENCY_INSURANCE_TYPES = frozenset(
    {STUDY_ABROAD, WORKING_HOLIDAY, BUSINESS_ASSIGNMENT}
)
FOREIGN_CURRENCY_PLAN = "외화"

CHILDREN_PLAN = "어린이플랜"
ECONOMY_PLAN = "실속플랜"
EURO_WORKING_HOLIDAY_PLAN = "워킹홀리데이(유로화플랜)"

KRW = "KRW"
USD = "USD"
EUR = "EUR"

EURO_COUNTRIES = frozenset(
    {
        "독일",
        "프랑스",
        "이탈리아",
        "스페인",
        "네덜란드",
        "벨기에",
        "그리스",
        "포르투갈",
        "오스트리아",
        "핀란드",
        "아일랜드",
        "룩셈부르크",
        "슬로바키아",
        "슬로베니아",
        "에스토니아",
        "라트비아",
        "리투아니아",
        "몰타",
        "키프로스",
    }
)

CHILD_AGE_LIMIT = 15
FULL_RATE_PERIOD_DAYS = 365
FULL_RATE_PERCENT = Decimal("100")
ROUNDING_UNIT = Decimal("10")
