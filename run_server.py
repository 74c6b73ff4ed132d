"""
Prompt Form Server Entry Point.

Usage:
    python run_server.py
    python run_server.py --port 9110 --log-level DEBUG

    # Use environment variables
    PROMPT_FORM_SERVER_PORT=8080 python run_server.py
"""

import argparse
import logging

from prompt_form.config import get_config
from prompt_form.web import serve


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Prompt Form Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  OPENAI_API_KEY              OpenAI API key for form generation
  OPENAI_MODEL                Model used to generate field lists
  PROMPT_FORM_SERVER_HOST     Host to bind (default: 0.0.0.0)
  PROMPT_FORM_SERVER_PORT     Port to listen on (default: 9110)
  PROMPT_FORM_LOG_LEVEL       Logging level (default: INFO)
        """,
    )
    parser.add_argument(
        "--host",
        default=config.server_host,
        help=f"Host to bind (default: {config.server_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.server_port,
        help=f"Port to listen on (default: {config.server_port})",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.log_level})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not config.openai_api_key:
        logging.getLogger("prompt-form").warning(
            "OPENAI_API_KEY is not set, only static field lists can be compiled"
        )

    serve(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
