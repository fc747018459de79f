"""
Configuration manager for trivia game settings.
"""
import logging
from typing import Any, Dict, List, Optional

from .models import DEFAULT_API_URL, GameSettings


class ConfigManager:
    """Manages and validates game settings."""

    # Default configuration values
    DEFAULT_QUESTION_COUNT = 10
    DEFAULT_RESULT_DELAY = 2.0
    DEFAULT_API_URL = DEFAULT_API_URL

    # Validation limits
    MIN_QUESTION_COUNT = 1
    MAX_QUESTION_COUNT = 50  # Open Trivia DB maximum per request
    MIN_RESULT_DELAY = 0.5
    MAX_RESULT_DELAY = 30

    def __init__(self):
        """Initialize ConfigManager with default settings."""
        self.logger = logging.getLogger(__name__)
        self._settings = GameSettings(
            question_count=self.DEFAULT_QUESTION_COUNT,
            result_delay=self.DEFAULT_RESULT_DELAY,
            api_url=self.DEFAULT_API_URL
        )

    def get_game_settings(self) -> GameSettings:
        """
        Get current game settings.

        Returns:
            Copy of the current GameSettings
        """
        return GameSettings(
            question_count=self._settings.question_count,
            result_delay=self._settings.result_delay,
            api_url=self._settings.api_url
        )

    def set_question_count(self, count: int) -> Dict[str, Any]:
        """
        Set the number of questions fetched per round.

        Args:
            count: Number of questions

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(count, int) or isinstance(count, bool):
            error_msg = f"Question count must be an integer, got {type(count).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected a number, got {type(count).__name__}"
            }

        if count < self.MIN_QUESTION_COUNT:
            error_msg = f"Question count must be at least {self.MIN_QUESTION_COUNT}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Too few questions: Minimum is {self.MIN_QUESTION_COUNT}"
            }

        if count > self.MAX_QUESTION_COUNT:
            error_msg = f"Question count cannot exceed {self.MAX_QUESTION_COUNT}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Too many questions: Maximum is {self.MAX_QUESTION_COUNT}"
            }

        self._settings.question_count = count
        self.logger.info(f"Question count set to {count}")
        return {
            'success': True,
            'message': f"Question count set to {count}",
            'user_message': f"✅ Question count set to {count}"
        }

    def set_result_delay(self, delay: float) -> Dict[str, Any]:
        """
        Set how long a result is shown before the next question.

        Args:
            delay: Delay in seconds

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(delay, (int, float)) or isinstance(delay, bool):
            error_msg = f"Result delay must be a number, got {type(delay).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected a number, got {type(delay).__name__}"
            }

        if delay < self.MIN_RESULT_DELAY:
            error_msg = f"Result delay must be at least {self.MIN_RESULT_DELAY} seconds"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Delay too short: Minimum is {self.MIN_RESULT_DELAY} seconds"
            }

        if delay > self.MAX_RESULT_DELAY:
            error_msg = f"Result delay cannot exceed {self.MAX_RESULT_DELAY} seconds"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Delay too long: Maximum is {self.MAX_RESULT_DELAY} seconds"
            }

        self._settings.result_delay = float(delay)
        self.logger.info(f"Result delay set to {delay} seconds")
        return {
            'success': True,
            'message': f"Result delay set to {delay} seconds",
            'user_message': f"✅ Results will show for {delay} seconds"
        }

    def set_api_url(self, url: str) -> Dict[str, Any]:
        """
        Set the question bank endpoint.

        Args:
            url: Absolute http(s) URL

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(url, str):
            error_msg = f"API URL must be a string, got {type(url).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected a URL string, got {type(url).__name__}"
            }

        url = url.strip()
        if not url.startswith(("http://", "https://")):
            error_msg = f"API URL must start with http:// or https://, got {url!r}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid URL: {url}"
            }

        self._settings.api_url = url
        self.logger.info(f"API URL set to {url}")
        return {
            'success': True,
            'message': f"API URL set to {url}",
            'user_message': f"✅ Questions will be fetched from {url}"
        }

    def load_from_dict(self, config: Optional[Dict[str, Any]]) -> List[str]:
        """
        Apply the ``game`` section of a configuration dictionary.

        Invalid values are logged and skipped so the defaults stay in effect.

        Args:
            config: Parsed config.json contents, may be None

        Returns:
            List of error messages for values that were rejected
        """
        errors = []
        game_config = (config or {}).get('game', {})
        if not isinstance(game_config, dict):
            error_msg = "'game' section must be an object"
            self.logger.error(error_msg)
            return [error_msg]

        setters = (
            ('question_count', self.set_question_count),
            ('result_delay', self.set_result_delay),
            ('api_url', self.set_api_url),
        )
        for key, setter in setters:
            if key not in game_config:
                continue
            result = setter(game_config[key])
            if not result['success']:
                errors.append(f"{key}: {result['error']}")

        if errors:
            self.logger.warning(f"Ignored {len(errors)} invalid configuration values")
        else:
            self.logger.info("Configuration applied successfully")
        return errors

    def get_settings_summary(self) -> str:
        """
        Get a formatted summary of current settings.

        Returns:
            Human-readable string describing current settings
        """
        return (
            f"Game Settings:\n"
            f"• Questions: {self._settings.question_count}\n"
            f"• Result delay: {self._settings.result_delay} seconds\n"
            f"• Question bank: {self._settings.api_url}"
        )
