"""
Entry point for PollChat application.
This module provides a command-line interface to start either a server or client.
"""

import argparse
import sys

from PollChat.config import config
from PollChat.core.logging import auto_configure, get_logging_manager
from PollChat.start import client, server


def parse(argv=None):
    # Initialize argument parser for command line interface
    parser = argparse.ArgumentParser(prog='pollchat', description='PollChat starter')
    subparsers = parser.add_subparsers(dest='command', required=True, help='Available commands')

    # Setup server command line arguments
    server_parser = subparsers.add_parser('server', help='Startup SERVER')
    server_parser.add_argument('--host', default=config.DEFAULT_HOST,
                               help=f'SERVER bind address (default: {config.DEFAULT_HOST})')
    server_parser.add_argument('--port', type=int, default=config.DEFAULT_SERVER_PORT,
                               help=f'SERVER port (default: {config.DEFAULT_SERVER_PORT})')
    server_parser.add_argument('--db', default=config.SQLITE_DB_FILE,
                               help=f'SQLite database file (default: {config.SQLITE_DB_FILE})')

    # Setup client command line arguments
    client_parser = subparsers.add_parser('client', help='Startup CLIENT')
    client_parser.add_argument('-u', '--url', default=config.DEFAULT_SERVER_URL,
                               help=f'Server URL (default: {config.DEFAULT_SERVER_URL})')
    client_parser.add_argument('-m', '--message', help='Send this message and exit')
    client_parser.add_argument('-g', '--get', action='store_true', help='Print chat history and exit')

    for sub in (server_parser, client_parser):
        sub.add_argument('--log-level', default=None,
                         choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                         help='Override the log level')

    return parser.parse_args(argv)


def main(argv=None):
    args = parse(argv)

    auto_configure()
    if args.log_level:
        get_logging_manager().set_level(args.log_level)

    # Launch either server or client based on command line arguments
    if args.command == 'server':
        return server.server(host=args.host, port=args.port, db=args.db)
    elif args.command == 'client':
        return client.client(url=args.url, message=args.message, get=args.get, log_level=args.log_level)
    else:
        raise Exception('Unknown command')


if __name__ == '__main__':
    sys.exit(main())
