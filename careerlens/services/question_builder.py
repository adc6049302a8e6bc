"""Turn the model's plain question strings into tagged skill questions."""

from typing import Any, Dict, Iterable, List

_CATEGORY_KEYWORDS = (
    ("soft", ("team", "communicat", "collaborat", "present")),
    ("experience", ("project", "built", "created", "developed")),
    ("education", ("course", "educat", "certificat", "train")),
)

_DIFFICULTY_KEYWORDS = (
    ("advanced", ("advanced", "complex", "expert", "master")),
    ("intermediate", ("intermediate", "moderate", "solid", "good")),
)


def categorize(question: str) -> str:
    text = question.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(k in text for k in keywords):
            return category
    return "technical"


def rate_difficulty(question: str) -> str:
    text = question.lower()
    for difficulty, keywords in _DIFFICULTY_KEYWORDS:
        if any(k in text for k in keywords):
            return difficulty
    return "beginner"


def build_questions(raw_questions: Iterable[Any]) -> List[Dict[str, str]]:
    """
    Strings get a category, a difficulty and an id such as "tb1"
    (category initial, difficulty initial, 1-based position).
    Objects that already carry an id and text pass through untouched.
    Anything else is skipped.
    """
    questions = []
    for index, item in enumerate(raw_questions):
        if isinstance(item, dict) and item.get("id") and item.get("text"):
            questions.append(item)
            continue
        if not isinstance(item, str) or not item.strip():
            continue

        category = categorize(item)
        difficulty = rate_difficulty(item)
        questions.append({
            "id": f"{category[0]}{difficulty[0]}{index + 1}",
            "text": item,
            "category": category,
            "difficulty": difficulty,
        })
    return questions
