"""
Question source for fetching trivia questions from Open Trivia DB.
"""
import asyncio
import json
import logging
import time
from typing import List, Optional

import aiohttp

from .models import DEFAULT_API_URL, TriviaQuestion


# Open Trivia DB response codes other than 0 (success)
RESPONSE_CODE_DESCRIPTIONS = {
    1: "not enough questions available for the query",
    2: "invalid parameter",
    3: "session token not found",
    4: "session token has returned all possible questions",
    5: "rate limit exceeded",
}


class QuestionSourceError(Exception):
    """Raised when a batch of questions cannot be fetched or decoded."""

    def __init__(self, message: str, response_code: Optional[int] = None):
        super().__init__(message)
        self.response_code = response_code


class QuestionSource:
    """Fetches batches of multiple-choice questions from the remote question bank."""

    QUESTION_TYPE = "multiple"

    def __init__(self, api_url: str = DEFAULT_API_URL,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize QuestionSource.

        Args:
            api_url: Endpoint of the question bank
            session: Optional shared aiohttp session; one is created lazily if omitted
        """
        self.api_url = api_url
        self.logger = logging.getLogger(__name__)
        self._session = session
        self._owns_session = session is None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this source created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def fetch(self, amount: int) -> List[TriviaQuestion]:
        """
        Fetch a batch of questions with a single request.

        Args:
            amount: Number of questions to request

        Returns:
            List of TriviaQuestion objects in the order served

        Raises:
            ValueError: If amount is not a positive integer
            QuestionSourceError: On transport, decoding, structure or API errors
        """
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 1:
            raise ValueError(f"Question amount must be a positive integer, got {amount!r}")

        params = {"amount": str(amount), "type": self.QUESTION_TYPE}
        request_start = time.time()
        self.logger.info(f"Fetching {amount} questions from {self.api_url}")

        try:
            session = await self._ensure_session()
            async with session.get(self.api_url, params=params) as response:
                response.raise_for_status()
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error(f"Transport error fetching questions: {e}")
            raise QuestionSourceError(f"Failed to reach question bank: {e}") from e

        try:
            data = json.loads(body.decode("utf-8"))
        except ValueError as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            self.logger.error(f"Undecodable body from question bank: {e}")
            raise QuestionSourceError(f"Invalid JSON from question bank: {e}") from e

        questions = self.parse_response(data)
        self.logger.info(
            f"Fetched {len(questions)} questions in {time.time() - request_start:.3f}s",
            extra={
                'event_type': 'questions_fetched',
                'count': len(questions),
                'timestamp': time.time()
            }
        )
        return questions

    def parse_response(self, data: dict) -> List[TriviaQuestion]:
        """
        Validate an API envelope and convert its results to questions.

        Args:
            data: Decoded JSON envelope

        Returns:
            List of TriviaQuestion objects

        Raises:
            QuestionSourceError: If the envelope is malformed or reports an error
        """
        problem = self.validate_response_structure(data)
        if problem:
            self.logger.error(f"Malformed question bank response: {problem}")
            raise QuestionSourceError(f"Malformed question bank response: {problem}")

        response_code = data["response_code"]
        if response_code != 0:
            description = RESPONSE_CODE_DESCRIPTIONS.get(response_code, "unknown error")
            self.logger.error(f"Question bank returned error code {response_code}: {description}")
            raise QuestionSourceError(
                f"API returned error code: {response_code} ({description})",
                response_code=response_code,
            )

        return [TriviaQuestion.from_dict(result) for result in data["results"]]

    def validate_response_structure(self, data) -> Optional[str]:
        """
        Check that decoded JSON has the expected envelope structure.

        Expected structure:
        {
            "response_code": int,
            "results": [
                {
                    "category": str,
                    "type": str,
                    "difficulty": str,
                    "question": str,
                    "correct_answer": str,
                    "incorrect_answers": [str, ...]
                }
            ]
        }

        Results are only checked when the response code is 0.

        Args:
            data: Decoded JSON to validate

        Returns:
            Description of the first problem found, or None if valid
        """
        if not isinstance(data, dict):
            return "response must be a JSON object"

        response_code = data.get("response_code")
        if not isinstance(response_code, int) or isinstance(response_code, bool):
            return "'response_code' must be an integer"

        if response_code != 0:
            return None

        results = data.get("results")
        if not isinstance(results, list):
            return "'results' must be an array"

        for i, result in enumerate(results):
            if not isinstance(result, dict):
                return f"result {i} must be an object"

            for key in ("question", "correct_answer"):
                if not isinstance(result.get(key), str):
                    return f"result {i} '{key}' field must be a string"

            incorrect = result.get("incorrect_answers")
            if not isinstance(incorrect, list) or not incorrect:
                return f"result {i} 'incorrect_answers' must be a non-empty array"

            if not all(isinstance(answer, str) for answer in incorrect):
                return f"result {i} 'incorrect_answers' must contain only strings"

        return None
