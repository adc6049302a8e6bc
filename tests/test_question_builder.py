from careerlens.services.question_builder import build_questions, categorize, rate_difficulty


def test_categories_by_keyword():
    assert categorize("Can you work in a team?") == "soft"
    assert categorize("Have you presented research findings?") == "soft"
    assert categorize("Have you built a personal website?") == "experience"
    assert categorize("Have you completed a certification?") == "education"
    assert categorize("Have you used Git?") == "technical"


def test_soft_keywords_win_over_experience():
    assert categorize("Have you built a project with a team?") == "soft"


def test_difficulty_by_keyword():
    assert rate_difficulty("Have you tuned a complex query?") == "advanced"
    assert rate_difficulty("Do you have a solid grasp of SQL joins?") == "intermediate"
    assert rate_difficulty("Have you used Figma?") == "beginner"


def test_ids_encode_category_difficulty_and_position():
    questions = build_questions([
        "Have you used Figma?",
        "Can you communicate design decisions clearly?",
        "Have you developed an expert-level design system?",
    ])

    assert [q["id"] for q in questions] == ["tb1", "sb2", "ea3"]
    assert questions[0] == {
        "id": "tb1",
        "text": "Have you used Figma?",
        "category": "technical",
        "difficulty": "beginner",
    }


def test_structured_questions_pass_through_and_junk_is_skipped():
    existing = {"id": "x1", "text": "Already tagged", "category": "soft", "difficulty": "beginner"}
    questions = build_questions([existing, 42, "   ", "Have you trained a model?"])

    assert questions[0] is existing
    assert questions[1]["id"] == "eb4"
    assert len(questions) == 2
