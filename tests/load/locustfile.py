"""
Load test script for the CareerLens backend.

Simulates a student walking through onboarding:
  1. Validate the typed career goal
  2. Submit the 5-question motivation quiz
  3. Fetch skill questions for a role
  4. Submit yes/no answers for analysis
  5. Open the role deep dive

Every step hits the model (or its fallback), so keep user counts modest
against a real Gemini key.

Run:
    pip install -e ".[load]"
    locust -f tests/load/locustfile.py --host https://YOUR-BACKEND-URL

Then open http://localhost:8089 to configure users/spawn rate and start.
"""

import os
import random
import time

from locust import HttpUser, task, between, SequentialTaskSet


# ---------------------------------------------------------------------------
# Configuration, overridden with env vars for different environments
# ---------------------------------------------------------------------------
ROLE_ID = os.getenv("LOAD_TEST_ROLE_ID", "software-engineer")
ROLE_NAME = os.getenv("LOAD_TEST_ROLE_NAME", "Software Engineer")

GOALS = ["Software Engineer", "Data Scientist", "Doctor", "Architect", "Teacher"]

QUIZ_ANSWERS = {
    "primaryDrive": "Passion for the subject",
    "tenYearVision": "Leading a small product team",
    "problemSolvingApproach": "Break it down and try things",
    "preferredLearningStyle": "Hands-on projects",
    "confidenceRating": "4",
}


def headers():
    return {"X-Correlation-ID": f"load-test-{time.monotonic()}"}


# ---------------------------------------------------------------------------
# Sequential flow: goal → quiz → skills → deep dive
# ---------------------------------------------------------------------------
class OnboardingFlow(SequentialTaskSet):
    """One student's pass through the onboarding screens."""

    goal = None
    questions = None

    @task
    def validate_goal_input(self):
        self.goal = random.choice(GOALS)
        with self.client.post(
            "/api/validate-goal-input",
            json={"userGoal": self.goal},
            headers=headers(),
            name="/api/validate-goal-input",
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Goal rejected: {resp.status_code}")

    @task
    def validate_goal(self):
        with self.client.post(
            "/api/validate-goal",
            json={"userGoal": self.goal, "answers": QUIZ_ANSWERS},
            headers=headers(),
            name="/api/validate-goal",
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Validation failed: {resp.status_code}")
            elif resp.json().get("pressureScore") not in (20, 50, 80):
                resp.failure("Unexpected pressureScore")

    @task
    def generate_questions(self):
        with self.client.post(
            "/api/ai-skill-assessment/generate-questions",
            json={"roleId": ROLE_ID, "roleName": ROLE_NAME},
            headers=headers(),
            name="/api/ai-skill-assessment/generate-questions",
            catch_response=True,
        ) as resp:
            if resp.status_code == 200:
                self.questions = resp.json().get("questions") or []
                if not self.questions:
                    resp.failure("No questions in response")
            else:
                resp.failure(f"Questions failed: {resp.status_code}")

    @task
    def analyze_skills(self):
        if not self.questions:
            return

        answers = {q["id"]: random.random() < 0.5 for q in self.questions}
        with self.client.post(
            "/api/ai-skill-assessment/analyze-skills",
            json={
                "roleId": ROLE_ID,
                "roleName": ROLE_NAME,
                "questions": self.questions,
                "answers": answers,
                "openResponse": "I built a small website for my school club.",
            },
            headers=headers(),
            name="/api/ai-skill-assessment/analyze-skills",
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Analysis failed: {resp.status_code}")

    @task
    def deep_dive(self):
        self.client.post(
            "/api/ai-deep-dive",
            json={"role": ROLE_NAME},
            headers=headers(),
            name="/api/ai-deep-dive",
        )

    @task
    def stop(self):
        self.interrupt()


# ---------------------------------------------------------------------------
# User class
# ---------------------------------------------------------------------------
class CareerLensUser(HttpUser):
    """Simulates a typical student session."""

    wait_time = between(1, 3)

    @task(3)
    def health_check(self):
        """Lightweight probe, should always be fast."""
        self.client.get("/health", name="/health")

    @task(1)
    def metrics(self):
        """Fetch in-process metrics."""
        self.client.get("/metrics", name="/metrics")

    tasks = {OnboardingFlow: 1}
