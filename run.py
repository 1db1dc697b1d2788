#!/usr/bin/env python3
"""
Quipay Error Translator - Main Runner

Usage:
    python run.py              # Start the web server
    python run.py --port 5000  # Custom port
    python run.py --debug      # Debug mode (exposes technical details)
"""
import argparse
import logging

from dotenv import load_dotenv

load_dotenv()


def setup_logging(level_name: str, debug: bool = False):
    """Configure logging."""
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)


def main():
    """Main entry point."""
    from config import get_settings

    settings = get_settings()

    parser = argparse.ArgumentParser(
        description='Quipay error translation service',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run.py                    # Start server on port 8000
    python run.py --port 5000        # Start on port 5000
    python run.py --debug            # Enable debug mode
    python run.py --host 127.0.0.1   # Localhost only

Environment (or .env):
    ENVIRONMENT               development | test | staging | production
    EXPOSE_TECHNICAL_DETAILS  force raw diagnostics on/off in responses
        """
    )

    parser.add_argument(
        '--host',
        default=settings.host,
        help=f'Host to bind to (default: {settings.host})'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=settings.port,
        help=f'Port to listen on (default: {settings.port})'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=settings.debug,
        help='Enable debug mode'
    )

    args = parser.parse_args()

    logger = setup_logging(settings.log_level, args.debug)

    if args.debug and not settings.debug:
        settings = settings.model_copy(update={"debug": True})

    logger.info("=" * 60)
    logger.info("%s", settings.app_name)
    logger.info("=" * 60)
    logger.info("Environment: %s", settings.environment)
    logger.info("Host: %s", args.host)
    logger.info("Port: %s", args.port)
    logger.info("Debug: %s", args.debug)
    logger.info("Technical details exposed: %s", settings.show_technical_details)
    logger.info("=" * 60)

    from error_translator.controllers import TranslationController
    from error_translator.views import create_app

    controller = TranslationController(settings)
    app = create_app(controller)

    logger.info("Starting server at http://%s:%s", args.host, args.port)

    app.run(
        host=args.host,
        port=args.port,
        debug=args.debug
    )


if __name__ == '__main__':
    main()
