from __future__ import annotations

import logging
from dataclasses import dataclass

from flask import current_app

from allwayscalc.services.ai import GoogleAIClient

logger = logging.getLogger(__name__)

ALGEBRA_PROMPT_TEMPLATE = """You are a friendly and helpful math tutor. Your task is to solve the following algebra problem and provide a clear, step-by-step explanation of how to arrive at the solution.

Problem:
{problem}

Provide the final answer and the detailed steps to solve it.
"""


class AlgebraSolverError(RuntimeError):
    pass


@dataclass(frozen=True)
class AlgebraInput:
    problem: str


@dataclass(frozen=True)
class AlgebraOutput:
    solution: str


class AlgebraSolverService:
    """Single-shot algebra tutor backed by Gemini; the model text is returned untouched."""

    def __init__(self, client: GoogleAIClient | None = None) -> None:
        cfg = current_app.config
        if client is None:
            if not cfg.get("GOOGLE_AI_API_KEY"):
                raise AlgebraSolverError("GOOGLE_AI_API_KEY is not configured.")
            client = GoogleAIClient.from_app()
        self.client = client
        self.model_name = cfg.get("GOOGLE_AI_ALGEBRA_MODEL") or cfg.get("GOOGLE_AI_DEFAULT_MODEL")

    @staticmethod
    def build_prompt(payload: AlgebraInput) -> str:
        return ALGEBRA_PROMPT_TEMPLATE.format(problem=payload.problem)

    def solve(self, payload: AlgebraInput) -> AlgebraOutput:
        if not payload.problem or not payload.problem.strip():
            raise AlgebraSolverError("Please enter a math problem.")

        logger.info("Solving algebra problem (%d chars) with %s", len(payload.problem), self.model_name)
        # GoogleAIClientError propagates; callers decide how to surface it.
        result = self.client.generate_content(
            contents=[{"role": "user", "parts": [{"text": self.build_prompt(payload)}]}],
            model=self.model_name,
        )
        return AlgebraOutput(solution=result.text)
