#!/usr/bin/env python3
"""
Run script for the IT asset tracker API
"""

import argparse
import os
import sys
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from itam import create_app
from itam.build import is_database_ready, release_database
from itam.utils.logger import get_logger


def parse_arguments():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='IT Asset Tracker API')
    parser.add_argument('--init-only', action='store_true',
                        help='Create and verify the database schema, then exit')
    parser.add_argument('--show-db', action='store_true',
                        help='Print every record table and exit')
    parser.add_argument('--host', default=os.environ.get('FLASK_HOST', '127.0.0.1'),
                        help='Interface to bind (default: FLASK_HOST or 127.0.0.1)')
    parser.add_argument('--port', type=int, default=None,
                        help='Port to listen on (default: PORT or 5000)')
    parser.add_argument('--debug', action='store_true',
                        default=os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes', 'on'),
                        help='Enable Flask debug mode')
    return parser.parse_args()


def main():
    args = parse_arguments()
    app = create_app()
    logger = get_logger("itam.run")

    try:
        if args.init_only:
            if not is_database_ready(app):
                logger.error("Schema initialization failed")
                return 1
            logger.info("Build completed. Exiting without starting web server.")
            return 0

        if args.show_db:
            from itam.utils._view_database import show_database
            show_database(app)
            return 0

        port = args.port or app.config['PORT']
        if args.debug:
            logger.warning("DEBUG MODE ENABLED - Do not use in production!")

        logger.info(f"IT Asset Tracker running on http://{args.host}:{port}")
        logger.info(f"API available at http://{args.host}:{port}/api")
        logger.info(f"Health check: http://{args.host}:{port}/health")
        app.run(debug=args.debug, host=args.host, port=port, use_reloader=False)
        return 0
    finally:
        release_database(app)


if __name__ == '__main__':
    sys.exit(main())
