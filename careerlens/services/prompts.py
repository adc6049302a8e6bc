"""
Prompt templates for the AI call sites.

Templates use str.format fields; literal JSON braces are doubled. A
PromptRequest must supply every field its template references.
"""
import string
from dataclasses import dataclass, field
from typing import Dict, Mapping


class PromptParameterError(KeyError):
    """A template parameter was not supplied (caller error)."""

    def __init__(self, template_id: str, missing: list[str]):
        self.template_id = template_id
        self.missing = missing
        super().__init__(f"Prompt '{template_id}' is missing parameters: {', '.join(missing)}")


@dataclass(frozen=True)
class PromptRequest:
    template_id: str
    parameters: Mapping[str, str] = field(default_factory=dict)


DEEP_DIVE_PROMPT = """ROLE:
You are an expert career counselor for the Indian job market. You give students an honest, practical picture of what a career looks like day to day.

CONTEXT:
A student is exploring the career "{role}".
What we know about the student: {persona_context}

TASK:
Write a deep dive on "{role}" covering:
1. A 2-3 sentence description of the role.
2. 5 typical daily responsibilities.
3. Salary ranges in India (LPA) at entry, mid and senior level.
4. A 5-step career path with the approximate year each step is reached.
5. 5 required skills.
6. The usual education route.
7. A one-sentence summary of the current job market.

OUTPUT FORMAT:
Your final output MUST be a single, clean, valid JSON object with exactly this structure:

{{
  "role": "{role}",
  "description": "...",
  "dailyResponsibilities": ["...", "..."],
  "salaryRange": {{
    "entry": "₹3-6 LPA",
    "mid": "₹6-12 LPA",
    "senior": "₹12-25 LPA+"
  }},
  "careerPath": ["Year 1: ...", "Year 3: ..."],
  "requiredSkills": ["...", "..."],
  "education": "...",
  "jobMarket": "..."
}}"""


SKILL_QUESTIONS_PROMPT = """ROLE:
You are a senior hiring manager and technical lead with 15+ years of experience in {role_name}. Your task is to create a concise and practical skill assessment test for a beginner who is new to the field.

CONTEXT:
A user has selected "{role_name}" as their career path. Generate a structured skill assessment to accurately gauge their current foundational knowledge and practical experience.

TASK:
Generate a structured skill assessment consisting of exactly 10 specific "Yes/No" or "Have you ever..." style questions. These questions should cover the most important foundational tools, concepts, and practical skills that a beginner should be familiar with for {role_name}.

OUTPUT FORMAT:
Your final output MUST be a single, clean, valid JSON object with exactly this structure:

{{
  "questions": [
    "Have you ever worked with [SPECIFIC_TOOL_OR_TECHNOLOGY_RELEVANT_TO_THIS_ROLE]?",
    "Do you understand [CORE_CONCEPT_RELEVANT_TO_THIS_ROLE]?",
    "Have you built or contributed to [TYPE_OF_PROJECT_RELEVANT_TO_THIS_ROLE]?"
  ]
}}

EXAMPLE OUTPUT FORMAT (for a Software Engineer role):
{{
  "questions": [
    "Have you ever written code in any programming language?",
    "Do you understand basic data structures like arrays and lists?",
    "Can you debug simple programming errors?",
    "Have you used version control systems like Git?",
    "Have you built any personal projects, even small ones?",
    "Do you understand basic algorithms like sorting?",
    "Have you worked with databases?",
    "Can you explain technical concepts to non-technical people?",
    "Can you work effectively in a team environment?",
    "Have you completed any coding courses or tutorials?"
  ]
}}

Additional Requirements:
1. Focus exclusively on {role_name} - do not provide generic examples
2. Ask about specific tools, technologies, and frameworks commonly used in {role_name}
3. Ask about hands-on experience with actual projects or coursework
4. Ask about specific knowledge areas relevant to {role_name}
5. Questions should help determine the user's current skill level in {role_name}
6. Do not use generic examples like "Figma, Sketch, or Adobe XD" unless {role_name} specifically involves design tools"""


SKILL_ANALYSIS_PROMPT = """ROLE:
You are an expert career mentor and performance coach. Your task is to analyze a student's self-assessed skill level for their chosen career and provide a clear, encouraging, and actionable evaluation.

CONTEXT:
A student has answered a skill assessment test for the career: "{role_name}". Analyze their answers below to determine their starting skill level, identify their current strengths, and pinpoint the best learning opportunities for them.

User's Checklist Answers:
{formatted_answers}

User's Open Response Answer: "{open_response}"

TASK:
Based on your expert analysis of all the user's answers, perform the following tasks:

1.  Determine Skill Level: Assign a single skill level from 0 to 4 based on the combination of their checklist answers and the depth and quality of their open response.
    * 0: Absolute Beginner (Little to no experience)
    * 1: Novice (Has theoretical knowledge but little practical application)
    * 2: Apprentice (Has completed some small projects or courses)
    * 3: Advanced (Has solid practical experience and can work independently)
    * 4: Expert (Deep knowledge and extensive project experience)
2.  Analysis Summary: Provide a brief, encouraging summary of their current position (2-3 sentences).
3.  Identify Strengths: Based on their positive answers ("Yes" responses) and project descriptions, identify 1-2 key "Strengths." These are the skills they can already build upon.
4.  Identify Learning Opportunities: Based on the gaps in their knowledge (the "No" answers) and their open response, identify the top 2-3 most important "Learning Opportunities." These are the areas they should focus on first.

OUTPUT FORMAT:
Your final output MUST be a single, clean, valid JSON object.

{{
  "skillLevel": 2,
  "analysisSummary": "You have a great foundation! You've started using the right tools and have completed a real project, which puts you at a solid Apprentice level.",
  "strengths": [
    "Practical Experience: You've already built a real website, which is the most important first step.",
    "Tool Familiarity: You have hands-on experience with Figma."
  ],
  "learningOpportunities": [
    "Focus on User Research: Your next big step is to learn how to conduct user research to inform your designs.",
    "Master Prototyping: Learn how to create interactive prototypes in Figma to bring your designs to life.",
    "Learn Design Systems: Understanding design systems is a key skill for working in professional teams."
  ]
}}

Important Notes:
1. Treat all "No" answers seriously - they represent genuine gaps in knowledge or experience
2. Focus on the specific tools, technologies, and skills mentioned in the questions
3. Pay special attention to any hands-on experience mentioned in the open response
4. Consider the depth and quality of the open response when determining skill level"""


GOAL_LEGITIMACY_PROMPT = """You are a career validation expert. Your task is to determine if the following text represents a VALID CAREER GOAL or PROFESSION.

User Input: "{user_goal}"

A VALID career goal is:
- A profession, job title, or career path (e.g., "Software Developer", "Doctor", "Teacher", "Engineer", "Business Analyst")
- A field of work (e.g., "Healthcare", "Technology", "Education")
- A specific role (e.g., "Data Scientist", "Marketing Manager", "Architect")

An INVALID career goal is:
- Personal characteristics (e.g., "happy", "tall", "smart")
- Random words or gibberish (e.g., "xyz", "abc", "123")
- Offensive or inappropriate content
- Non-career related terms
- Single letters or very short meaningless text
- Adjectives or descriptive words that are not careers

Respond with ONLY a JSON object in this exact format:
{{
  "isValid": true or false,
  "reason": "Brief explanation (only if invalid)"
}}

Examples:
Input: "Software Developer" → {{"isValid": true, "reason": ""}}
Input: "Doctor" → {{"isValid": true, "reason": ""}}
Input: "xyz" → {{"isValid": false, "reason": "This does not appear to be a valid career or profession."}}
Input: "happy" → {{"isValid": false, "reason": "This is an emotion, not a career goal."}}
Input: "AI Engineer" → {{"isValid": true, "reason": ""}}

Now validate: "{user_goal}\""""


GOAL_ALIGNMENT_PROMPT = """**ROLE:**
You are an expert career counselor and performance coach for the Indian context. Your specialty is helping ambitious students validate their chosen career goals. You are not just a cheerleader; you provide a balanced analysis, highlighting both their strengths and potential challenges to ensure they are making a well-considered choice.

---

**CONTEXT:**
A student has already decided on a career goal and has answered a 5-question validation quiz. Your task is to analyze their stated goal in light of their answers about their motivations, working style, and long-term vision.

* **User's Stated Career Goal:** "{user_goal}"

* **User's Validation Quiz Answers:**
    1.  **Primary Drive:** "{primary_drive}"
    2.  **10-Year Vision:** "{ten_year_vision}"
    3.  **Problem-Solving Approach:** "{problem_solving_approach}"
    4.  **Preferred Learning Style:** "{preferred_learning_style}"
    5.  **Confidence Rating (1-5):** "{confidence_rating}"

---

**TASK:**
Based on your expert analysis, perform the following two tasks:

**Part 1: Determine the Alignment Score & Summary**
1.  **Analyze Alignment:** Critically assess how well the user's motivations and preferences (from their answers) align with the typical demands and realities of their chosen career goal.
2.  **Assign a Status:** Based on your analysis, assign one of three validation statuses:
    * **"Excellent Match":** Use this if the user's drivers and goals are perfectly aligned with the career.
    * **"Good Foundation":** Use this if there is a solid alignment but some potential areas for growth or consideration.
    * **"Requires Reflection":** Use this only if there's a significant mismatch between their stated goal and their core motivations (e.g., choosing a highly collaborative role but preferring to solve problems alone).
3.  **Write a Validation Summary:** Write a concise, 2-3 sentence summary explaining your reasoning. Be encouraging, but also realistic. **DO NOT MENTION THE USER'S SPECIFIC ANSWERS IN THIS SUMMARY.** Focus on the general alignment between their motivations and the career path.

**Part 2: Provide Actionable Insights**
Based on the user's answers, provide two specific, actionable insights:
1.  **"Your Superpower for this Goal":** Identify the user's single biggest strength from their answers that will help them succeed in this career.
2.  **"Something to Keep in Mind":** Identify one potential challenge or area for self-awareness based on their answers. Frame this constructively.

---

**OUTPUT FORMAT:**
Your final output MUST be a single, clean, valid JSON object. Do not include any text outside of this structure.

{{
  "validatedGoal": "{user_goal}",
  "validationStatus": "Excellent Match",
  "validationSummary": "Your passion for the subject combined with your preference for hands-on practice indicates strong alignment with technical fields. Your long-term vision of becoming an expert shows you have the focus needed to succeed.",
  "actionableInsights": {{
    "superpower": "Your preference for 'Researching Extensively' is a true superpower for an AI Developer, as the field is constantly evolving and requires continuous learning.",
    "thingToConsider": "Your confidence rating is solid at 4/5. As you begin, focus on building small, successful projects to turn that confidence into proven skill and push it to a 5/5."
  }}
}}"""


PROMPT_TEMPLATES: Dict[str, str] = {
    "deep_dive": DEEP_DIVE_PROMPT,
    "skill_questions": SKILL_QUESTIONS_PROMPT,
    "skill_analysis": SKILL_ANALYSIS_PROMPT,
    "goal_legitimacy": GOAL_LEGITIMACY_PROMPT,
    "goal_alignment": GOAL_ALIGNMENT_PROMPT,
}


def template_fields(template: str) -> set[str]:
    return {name for _, name, _, _ in string.Formatter().parse(template) if name}


def render_prompt(request: PromptRequest) -> str:
    """Fill a registered template. Unknown ids raise KeyError."""
    template = PROMPT_TEMPLATES[request.template_id]
    missing = sorted(template_fields(template) - set(request.parameters))
    if missing:
        raise PromptParameterError(request.template_id, missing)
    return template.format_map({k: str(v) for k, v in request.parameters.items()})
