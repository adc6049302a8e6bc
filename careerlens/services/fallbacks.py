"""Static payloads returned when a model invocation cannot produce a result."""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from careerlens.services.scoring import EXCELLENT_MATCH, GOOD_FOUNDATION, REQUIRES_REFLECTION


DEEP_DIVE_FALLBACK: Mapping[str, Any] = MappingProxyType({
    "role": "Software Engineer",
    "description": "A Software Engineer designs, develops, and maintains software applications and systems.",
    "dailyResponsibilities": (
        "Writing and testing code",
        "Debugging and resolving issues",
        "Collaborating with team members",
        "Participating in code reviews",
        "Documenting technical specifications",
    ),
    "salaryRange": MappingProxyType({
        "entry": "₹3-6 LPA",
        "mid": "₹6-12 LPA",
        "senior": "₹12-25 LPA+",
    }),
    "careerPath": (
        "Year 1: Junior Developer",
        "Year 2: Software Engineer",
        "Year 3: Senior Engineer",
        "Year 5: Tech Lead",
        "Year 7-10: Engineering Manager/Architect",
    ),
    "requiredSkills": (
        "Programming languages (Java, Python, etc.)",
        "Problem-solving abilities",
        "Communication skills",
        "Team collaboration",
        "Continuous learning mindset",
    ),
    "education": "Bachelor's degree in Computer Science or related field",
    "jobMarket": "High demand across various industries with good growth prospects",
})


def _q(qid: str, text: str, category: str, difficulty: str) -> Mapping[str, str]:
    return MappingProxyType({"id": qid, "text": text, "category": category, "difficulty": difficulty})


DEFAULT_QUESTIONS: Mapping[str, tuple] = MappingProxyType({
    "software-engineer": (
        _q("t1", "Have you ever written code in any programming language?", "technical", "beginner"),
        _q("t2", "Do you understand basic data structures like arrays and lists?", "technical", "beginner"),
        _q("t3", "Can you debug simple programming errors?", "technical", "beginner"),
        _q("s1", "Can you explain technical concepts to non-technical people?", "soft", "beginner"),
        _q("e1", "Have you built any personal projects, even small ones?", "experience", "beginner"),
        _q("e2", "Have you used version control systems like Git?", "experience", "beginner"),
        _q("t4", "Do you understand basic algorithms like sorting?", "technical", "intermediate"),
        _q("t5", "Have you worked with databases?", "technical", "intermediate"),
        _q("s2", "Can you work effectively in a team environment?", "soft", "beginner"),
        _q("e3", "Have you completed any coding courses or tutorials?", "education", "beginner"),
    ),
    "data-scientist": (
        _q("t1", "Have you ever used Python or R for data analysis?", "technical", "beginner"),
        _q("t2", "Do you understand basic statistics and probability?", "technical", "beginner"),
        _q("t3", "Can you clean and preprocess messy data?", "technical", "beginner"),
        _q("s1", "Can you translate business questions into analytical frameworks?", "soft", "beginner"),
        _q("e1", "Have you worked on any data analysis projects?", "experience", "beginner"),
        _q("e2", "Have you created data visualizations?", "experience", "beginner"),
        _q("t4", "Do you understand machine learning concepts?", "technical", "intermediate"),
        _q("t5", "Have you used SQL to query databases?", "technical", "intermediate"),
        _q("s2", "Can you communicate insights effectively?", "soft", "intermediate"),
        _q("e3", "Have you completed any data science courses?", "education", "beginner"),
    ),
    "entrepreneur": (
        _q("t1", "Have you ever identified a problem and thought of a solution for it?", "technical", "beginner"),
        _q("s1", "Can you communicate your ideas effectively to others?", "soft", "beginner"),
        _q("e1", "Have you ever started a small business or project, even a hobby one?", "experience", "beginner"),
        _q("e2", "Have you researched the market or competition for an idea?", "experience", "beginner"),
        _q("t2", "Do you understand basic financial concepts like profit and loss?", "technical", "beginner"),
        _q("s2", "Can you work with uncertainty and adapt to changing situations?", "soft", "beginner"),
        _q("e3", "Have you created any business plans or pitch decks?", "experience", "intermediate"),
        _q("t3", "Do you understand basic marketing concepts?", "technical", "beginner"),
        _q("s3", "Can you lead and motivate a team towards a common goal?", "soft", "intermediate"),
        _q("e4", "Have you raised any funds or investments for a project?", "experience", "intermediate"),
    ),
    "default": (
        _q("t1", "Have you worked with computers regularly?", "technical", "beginner"),
        _q("s1", "Do you communicate effectively with others?", "soft", "beginner"),
        _q("e1", "Have you completed any relevant courses or training?", "education", "beginner"),
        _q("e2", "Have you worked on any projects, even personal ones?", "experience", "beginner"),
        _q("t2", "Are you comfortable learning new software tools?", "technical", "beginner"),
        _q("s2", "Can you work in team environments?", "soft", "beginner"),
        _q("e3", "Have you solved problems systematically?", "experience", "beginner"),
        _q("t3", "Are you committed to continuous learning?", "technical", "beginner"),
        _q("s3", "Can you adapt to new situations?", "soft", "beginner"),
        _q("e4", "Have you sought out learning opportunities?", "education", "beginner"),
    ),
})


SKILL_ANALYSIS_FALLBACK: Mapping[str, Any] = MappingProxyType({
    "skillLevel": 1,
    "analysisSummary": (
        "You're taking your first steps in this exciting field! Your enthusiasm to learn is your "
        "greatest asset. With dedication and the right guidance, you'll progress quickly."
    ),
    "strengths": ("Enthusiasm to learn", "Willingness to grow"),
    "learningOpportunities": (
        "Start with foundational courses in your chosen field",
        "Complete hands-on beginner projects",
        "Join online communities and forums for support",
        "Practice regularly to build muscle memory",
    ),
})


# Legitimacy check fails open: if the model can't judge, let the goal through
GOAL_LEGITIMACY_FALLBACK: Mapping[str, Any] = MappingProxyType({"isValid": True, "reason": ""})


ALIGNMENT_VERDICTS: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    EXCELLENT_MATCH: MappingProxyType({
        "validationStatus": EXCELLENT_MATCH,
        "validationSummary": (
            "Your passion for the subject combined with your preference for hands-on practice "
            "indicates strong alignment with technical fields. Your long-term vision shows focused ambition."
        ),
        "actionableInsights": MappingProxyType({
            "superpower": (
                "Your passion for the subject is a true superpower, as it will sustain you through "
                "challenges and keep you motivated during difficult periods."
            ),
            "thingToConsider": (
                "Your confidence is strong, but remember that expertise comes from continuous learning. "
                "Stay curious and keep updating your skills."
            ),
        }),
    }),
    GOOD_FOUNDATION: MappingProxyType({
        "validationStatus": GOOD_FOUNDATION,
        "validationSummary": (
            "You have a solid foundation for pursuing this career with some clear motivations and a "
            "reasonable vision. There are areas where you could develop stronger alignment."
        ),
        "actionableInsights": MappingProxyType({
            "superpower": (
                "Your balanced approach to problem-solving will serve you well in navigating the "
                "complexities of this field."
            ),
            "thingToConsider": (
                "Consider exploring how your preferred learning style aligns with the typical training "
                "and skill development in this career."
            ),
        }),
    }),
    REQUIRES_REFLECTION: MappingProxyType({
        "validationStatus": REQUIRES_REFLECTION,
        "validationSummary": (
            "There appears to be some misalignment between your stated motivations and your chosen "
            "career path. It might be worth exploring whether this goal truly resonates with your "
            "interests and strengths."
        ),
        "actionableInsights": MappingProxyType({
            "superpower": (
                "Your openness to different approaches to learning and problem-solving shows "
                "adaptability, which is valuable in any field."
            ),
            "thingToConsider": (
                "Take time to reflect on what genuinely excites you about this career beyond external "
                "factors like salary or prestige."
            ),
        }),
    }),
})


def to_plain(value: Any) -> Any:
    """Deep-copy a frozen payload into JSON-ready dicts and lists."""
    if isinstance(value, Mapping):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def deep_dive_fallback(requested_role: str = None) -> Dict[str, Any]:
    payload = to_plain(DEEP_DIVE_FALLBACK)
    if requested_role:
        payload["role"] = requested_role
    return payload


def questions_fallback(role_id: str, role_name: str) -> List[Dict[str, str]]:
    if role_id in DEFAULT_QUESTIONS:
        return to_plain(DEFAULT_QUESTIONS[role_id])
    if "entrepreneur" in role_id or "entrepreneur" in role_name.lower():
        return to_plain(DEFAULT_QUESTIONS["entrepreneur"])
    return to_plain(DEFAULT_QUESTIONS["default"])


def skill_analysis_fallback() -> Dict[str, Any]:
    return to_plain(SKILL_ANALYSIS_FALLBACK)


def goal_legitimacy_fallback() -> Dict[str, Any]:
    return to_plain(GOAL_LEGITIMACY_FALLBACK)


def alignment_status_from_answers(answers: Mapping[str, Any]) -> str:
    """Keyword heuristic over the quiz answers used when the model is unavailable."""
    drive = str(answers.get("primaryDrive", ""))
    confidence = str(answers.get("confidenceRating", "")).strip()

    if any(word in drive for word in ("Passion", "Personal", "Social")):
        if confidence in ("4", "5"):
            return EXCELLENT_MATCH
    elif any(word in drive for word in ("Family", "Financial", "Peer")):
        if confidence in ("1", "2"):
            return REQUIRES_REFLECTION
    return GOOD_FOUNDATION


def goal_alignment_fallback(user_goal: str, answers: Mapping[str, Any]) -> Dict[str, Any]:
    verdict = to_plain(ALIGNMENT_VERDICTS[alignment_status_from_answers(answers)])
    return {"validatedGoal": user_goal, **verdict}
