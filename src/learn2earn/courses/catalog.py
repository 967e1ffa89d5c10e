"""Course seed data: three video courses and three MCQ courses."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import TypeAdapter

from learn2earn.db.models import Course

if TYPE_CHECKING:
    from learn2earn.database import Store

logger = structlog.get_logger()

_courses_adapter: TypeAdapter[list[Course]] = TypeAdapter(list[Course])

COURSE_SEED_DATA: list[dict] = [
    # Video courses
    {
        "id": "c1",
        "title": "JavaScript Basics",
        "platform": "Udemy",
        "platformInitial": "U",
        "tokenValue": 30,
        "rewardAmount": 5,
        "durationHours": 10,
        "type": "video",
        "videoUrl": "https://youtube.com/shorts/JPsJL123L8k",
    },
    {
        "id": "c2",
        "title": "React Essentials",
        "platform": "IBM",
        "platformInitial": "IBM",
        "tokenValue": 75,
        "rewardAmount": 15,
        "durationHours": 30,
        "type": "video",
        "videoUrl": "https://youtube.com/shorts/LoMNmhyUkCM",
    },
    {
        "id": "c3",
        "title": "LeetCode 10 Problems",
        "platform": "Amazon",
        "platformInitial": "AZ",
        "tokenValue": 95,
        "rewardAmount": 20,
        "durationHours": 20,
        "type": "video",
        "videoUrl": "https://youtube.com/shorts/Rfm8MnQzLeo",
    },
    # MCQ courses
    {
        "id": "c4",
        "title": "Cloud Basics for Beginners",
        "platform": "Google",
        "platformInitial": "G",
        "tokenValue": 45,
        "rewardAmount": 8,
        "durationHours": 1,
        "type": "mcq",
        "content": [
            "Cloud computing means storing and accessing data over the internet instead of your computer.",
            "Major providers include Google Cloud, AWS, Azure.",
            "Cloud helps companies scale instantly.",
        ],
        "mcqs": [
            {
                "q": "Cloud computing means:",
                "options": [
                    "Storing data only in pen drive",
                    "Accessing data & apps via internet",
                    "Only games stored in cloud",
                    "None",
                ],
                "correct": 1,
            },
            {
                "q": "Which company provides cloud services?",
                "options": ["Google", "Infosys", "Zoom", "Jio TV"],
                "correct": 0,
            },
        ],
    },
    {
        "id": "c5",
        "title": "Cybersecurity Essentials",
        "platform": "Microsoft",
        "platformInitial": "MS",
        "tokenValue": 60,
        "rewardAmount": 10,
        "durationHours": 2,
        "type": "mcq",
        "content": [
            "Cybersecurity protects systems and data from attacks.",
            "Phishing is when attackers trick users into revealing sensitive information.",
            "Always enable Two-Factor Authentication.",
        ],
        "mcqs": [
            {
                "q": "What is phishing?",
                "options": [
                    "Fishing in water",
                    "Tricking users to give sensitive data",
                    "Fixing internet",
                    "Cleaning laptop",
                ],
                "correct": 1,
            },
            {
                "q": "Which is a security best practice?",
                "options": [
                    "Use same password everywhere",
                    "Disable lockscreen",
                    "Use 2FA",
                    "Share password with friends",
                ],
                "correct": 2,
            },
        ],
    },
    {
        "id": "c6",
        "title": "Blockchain Fundamentals",
        "platform": "Meta",
        "platformInitial": "M",
        "tokenValue": 80,
        "rewardAmount": 12,
        "durationHours": 3,
        "type": "mcq",
        "content": [
            "Blockchain is a distributed ledger across many computers.",
            "It is tamper-resistant and transparent.",
            "Bitcoin is the first real-world blockchain implementation.",
        ],
        "mcqs": [
            {
                "q": "Blockchain is:",
                "options": ["A video game", "A distributed ledger", "A bank app", "Chat application"],
                "correct": 1,
            },
            {
                "q": "First major blockchain:",
                "options": ["Ethereum", "Google Cloud", "Bitcoin", "Amazon Prime"],
                "correct": 2,
            },
        ],
    },
]


def seed_courses(store: Store) -> bool:
    """Install the built-in catalog if the store has none. Returns True if seeded."""
    if store.courses:
        return False
    store.courses.extend(_courses_adapter.validate_python(COURSE_SEED_DATA))
    logger.info("courses_seeded", count=len(store.courses))
    return True
