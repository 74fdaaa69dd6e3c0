"""
Main entry point for serving the word-level tokenizer over HTTP.
"""

import argparse
import logging
from pathlib import Path

import uvicorn

from configs.config import Config
from wordtok.api import create_app
from wordtok.data.vocabs import VocabEngine
from wordtok.utils.logger import setup_logger


def main():
    """Load configuration, build the engine and serve it."""
    parser = argparse.ArgumentParser(description="Serve the word-level tokenizer")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/default.yaml",
        help="Path to configuration YAML file"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (overrides config)"
    )
    parser.add_argument(
        "--log-output",
        type=str,
        default=None,
        help="Log directory or file (overrides config)"
    )

    args = parser.parse_args()

    config_path = Path(args.config)
    config = Config.from_yaml(config_path) if config_path.exists() else Config()

    if args.host is not None:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = args.port
    if args.log_output is not None:
        config.logging.output = args.log_output

    logger = setup_logger(
        output=config.logging.output,
        color=config.logging.color,
        name=config.logging.name,
        level=getattr(logging, config.logging.level)
    )

    logger.info("=" * 60)
    logger.info("Word Tokenizer")
    logger.info("=" * 60)
    logger.info(f"Configuration: {config_path if config_path.exists() else 'defaults'}")
    logger.info(f"Learn on encode: {config.tokenizer.extend_on_encode}")
    logger.info(f"Server running on http://{config.server.host}:{config.server.port}")

    engine = VocabEngine(extend_on_encode=config.tokenizer.extend_on_encode, logger=logger)
    app = create_app(engine, config=config, logger=logger)

    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level=config.logging.level.lower())


if __name__ == "__main__":
    main()
