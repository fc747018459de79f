#!/usr/bin/env python3
"""
Terminal Trivia - Main Entry Point

Runs the full-screen trivia game. Settings are read from config.json when it
exists; otherwise the defaults are used.

Usage:
    python main.py [--config PATH] [--log-level LEVEL]

Keys:
    ENTER  start a round / play again
    1-4    answer the current question
    q      quit
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from trivia.app import TriviaApp
from trivia.config_manager import ConfigManager
from trivia.game import Game
from trivia.input_dispatcher import InputDispatcher
from trivia.question_source import QuestionSource


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Play trivia in your terminal.")
    parser.add_argument(
        "--config", default="config.json",
        help="path to the JSON configuration file (default: config.json)"
    )
    parser.add_argument(
        "--log-level", default=None,
        help="override the logging level from the configuration file"
    )
    return parser.parse_args(argv)


def load_config(config_path):
    """Load configuration from a JSON file, returning {} if it does not exist."""
    config_path = Path(config_path)

    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON in {config_path}: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error loading {config_path}: {e}")
        sys.exit(1)

    if not isinstance(config, dict):
        print(f"❌ Error: {config_path} must contain a JSON object")
        sys.exit(1)
    return config


def setup_logging_from_config(config, level_override=None):
    """
    Set up logging based on configuration.

    The terminal belongs to the game screen, so all handlers write to files.
    """
    log_config = config.get('logging', {})
    level_name = (level_override or log_config.get('level', 'INFO')).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_directory = Path(log_config.get('log_directory', './logs/'))

    log_directory.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_directory / "trivia.log", encoding='utf-8')
        ]
    )

    error_handler = logging.FileHandler(log_directory / "errors.log", encoding='utf-8')
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logging.getLogger().addHandler(error_handler)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)

    return logging.getLogger(__name__)


def build_app(config):
    """Wire the game components together from a configuration dictionary."""
    config_manager = ConfigManager()
    config_manager.load_from_dict(config)
    logging.getLogger(__name__).info(config_manager.get_settings_summary())
    settings = config_manager.get_game_settings()

    question_source = QuestionSource(api_url=settings.api_url)
    game = Game(question_source, settings)
    dispatcher = InputDispatcher(game, result_delay=settings.result_delay)
    return TriviaApp(game, dispatcher, question_source)


def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.config)
    logger = setup_logging_from_config(config, args.log_level)

    try:
        app = build_app(config)
        app.run()
    except KeyboardInterrupt:
        logger.info("Game stopped by user")
        return 0
    except Exception as e:
        logger.exception("Game terminated with an error")
        print(f"❌ Trivia stopped: {e}", file=sys.stderr)
        return 1

    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
