"""Pattern tables used by the résumé extraction passes."""

from __future__ import annotations

import re

NAME_SCAN_LINES = 8
NAME_MIN_CHARS = 2
NAME_MAX_CHARS = 50

NAME_BOILERPLATE_RE = re.compile(
    r"\b(resume|résumé|cv|curriculum|vitae|contact|objective|summary|profile|references|email|phone|address)\b",
    re.IGNORECASE,
)
THREE_DIGITS_RE = re.compile(r"\d{3}")
PUNCTUATION_RE = re.compile(r"[^\w\s]")
STRICT_NAME_RE = re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3}$")
LOOSE_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z'.-]*(?:\s+[A-Za-z][A-Za-z'.-]*){1,3}$")

EMAIL_RE = re.compile(r"(?<![\w.-])[\w.-]+@[\w.-]+\.\w+")
PHONE_RE = re.compile(r"(?<![\d+])(?:\+?\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)")

LINKEDIN_RE = re.compile(r"linkedin\.com/in/([\w-]+)", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/([\w-]+)", re.IGNORECASE)
URL_RE = re.compile(r"https?://[^\s,|<>\"']+", re.IGNORECASE)
URL_TRAILING_CHARS = ".,;:)]}"

LABELED_LOCATION_RE = re.compile(r"(?im)^[ \t]*(?:location|address|city)[ \t]*:[ \t]*([^\n|]+)")
US_STATES = (
    "AL AK AZ AR CA CO CT DE DC FL GA HI ID IL IN IA KS KY LA ME MD MA MI MN MS MO MT NE NV NH NJ NM NY "
    "NC ND OH OK OR PA RI SC SD TN TX UT VT VA WA WV WI WY"
).split()
CITY_STATE_RE = re.compile(r"\b([A-Z][a-zA-Z]+(?:[ \t][A-Z][a-zA-Z]+){0,3}),[ \t]*(" + "|".join(US_STATES) + r")\b")
COUNTRIES = (
    "USA",
    "United States",
    "Canada",
    "Mexico",
    "Brazil",
    "UK",
    "United Kingdom",
    "Ireland",
    "Germany",
    "France",
    "Spain",
    "Italy",
    "Netherlands",
    "Sweden",
    "Poland",
    "India",
    "Pakistan",
    "China",
    "Japan",
    "Singapore",
    "Australia",
    "New Zealand",
    "UAE",
)
CITY_COUNTRY_RE = re.compile(
    r"\b([A-Z][a-z]+(?:[ \t][A-Z][a-z]+)?),[ \t]*(" + "|".join(re.escape(name) for name in COUNTRIES) + r")\b"
)

PROFESSION_NOUNS = (
    "engineer",
    "developer",
    "analyst",
    "manager",
    "consultant",
    "designer",
    "architect",
    "specialist",
    "director",
    "lead",
)
PROFESSION_RE = re.compile(
    r"\b(?:(?:senior|junior|lead|principal|staff)[ \t]+)?"
    r"(?:(?!(?:a|an|the|and|or|as|of|at|in|for|with|to|is|am)[ \t])[A-Za-z]+(?:-[A-Za-z]+|[+#]{1,2}){0,2}[ \t]+)?"
    r"(?:" + "|".join(PROFESSION_NOUNS) + r")\b"
    r"(?:[ \t]+(?-i:[A-Z][\w+#.-]*))?",
    re.IGNORECASE,
)

SUMMARY_LABEL_RE = re.compile(
    r"(?im)^[ \t]*(?:professional[ \t]+summary|summary|objective|profile|about(?:[ \t]+me)?)\b"
    r"(?:[ \t]*:|[ \t]*[-–](?=\s|$)|(?=\s|$))[ \t]*(.*)$"
)
SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s")

SKILLS_LABEL_RE = re.compile(
    r"(?im)^[ \t]*(?:(?:technical|core|key)[ \t]+)?"
    r"(?:skills|technologies|tools|programming(?:[ \t]+languages)?)"
    r"(?:[ \t]*:|[ \t]*[-–](?=\s|$)|[ \t]*$)[ \t]*(.*)$"
)
SKILL_SPLIT_RE = re.compile(r"[,;|]")

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
ONGOING_RE = re.compile(r"\b(?:present|current|now)\b", re.IGNORECASE)
_MONTH = (
    r"(?:(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?|"
    r"sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?[ \t]+)?"
)
YEAR_RANGE_RE = re.compile(
    r"\b" + _MONTH + r"(?:19|20)\d{2}[ \t]*(?:-|–|—|to)[ \t]*"
    r"(?:" + _MONTH + r"(?:19|20)\d{2}|present|current|now)\b",
    re.IGNORECASE,
)
ROLE_SPLIT_RE = re.compile(r"\s+(?:at|@)\s+|\s+[-–—|]\s+|,\s*", re.IGNORECASE)

EDUCATION_KEYWORD_RE = re.compile(r"\b(?:bachelor|master|phd|ph\.d|degree|university|college|institute)", re.IGNORECASE)
DEGREE_RE = re.compile(
    r"\b(?:bachelor|master|doctor|associate)(?:'?s)?"
    r"(?:[ \t]+(?:of|in)[ \t]+[A-Za-z]+(?:[ \t]+(?-i:[A-Z][a-z]+)){0,4})?"
    r"|\bph\.?d\b\.?"
    r"|\bmba\b"
    r"|\b[BM]\.?(?:Sc|S|A|Eng|Tech)\b\.?",
    re.IGNORECASE,
)
INSTITUTION_RE = re.compile(
    r"\b(?:[A-Z][\w.&'-]*[ \t]+){0,5}?(?:University|College|Institute|School)"
    r"(?:[ \t]+of(?:[ \t]+[A-Z][\w.&'-]*){1,4})?"
)

CERTIFICATION_KEYWORD_RE = re.compile(r"certification|certified|certificate", re.IGNORECASE)
EMPTY_PARENS_RE = re.compile(r"\(\s*\)")
ACHIEVEMENT_KEYWORD_RE = re.compile(r"achievement|award|recognition|honor|accomplishment", re.IGNORECASE)
PROJECT_RE = re.compile(r"project", re.IGNORECASE)
PROJECT_MANAGER_RE = re.compile(r"project\s+manager", re.IGNORECASE)
PROJECT_PHRASE_CHARS_RE = re.compile(r"[\w '&-]*")

LANGUAGE_LINE_RE = re.compile(r"languages|language|fluent|native|bilingual", re.IGNORECASE)
LANGUAGE_VOCABULARY = (
    "english",
    "spanish",
    "french",
    "german",
    "chinese",
    "japanese",
    "korean",
    "arabic",
    "hindi",
    "urdu",
    "punjabi",
)
LANGUAGE_WORD_RES = tuple((language, re.compile(rf"\b{language}\b", re.IGNORECASE)) for language in LANGUAGE_VOCABULARY)

WORK_ARRANGEMENT_RE = re.compile(r"\b(remote|hybrid|on-site|onsite|in-office)\b", re.IGNORECASE | re.ASCII)
WORK_ARRANGEMENT_LABELS = {
    "remote": "Remote",
    "hybrid": "Hybrid",
    "on-site": "On-site",
    "onsite": "On-site",
    "in-office": "On-site",
}
