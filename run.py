#!/usr/bin/env python3
"""
Main entry point for todokeeper.
Runs the API server, or talks to a running server from the command line.
"""

import os
import sys
import json
import argparse
import logging

import requests

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from todokeeper.core.config import get_settings
from todokeeper.core.logging_config import setup_logging
from todokeeper.utils.api_client import TodoApiClient, TodoApiError

logger = logging.getLogger(__name__)

CLI_COMMANDS = ['list', 'get', 'create', 'update', 'delete']


def parse_args(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description='todokeeper - JSON file backed todo list service')
    parser.add_argument('mode', choices=['server', 'cli'], help='Run mode: server (API) or cli (command line)')
    parser.add_argument('--port', type=int, default=settings.port, help='Port number for server mode')
    parser.add_argument('--host', default=settings.host, help='Host for server mode')
    parser.add_argument('--url', default=settings.api_url, help='Server URL for cli mode')
    parser.add_argument('--command', choices=CLI_COMMANDS, help='Command to run in CLI mode')
    parser.add_argument('--args', nargs=argparse.REMAINDER, default=[], help='Arguments for CLI command')
    return parser.parse_args(argv)


def parse_bool(value: str) -> bool:
    return value.strip().lower() in {'1', 'true', 'yes', 'y'}


def run_command(client: TodoApiClient, command: str, args: list):
    """Run a single CLI command and return its JSON-serialisable result."""
    if command == 'list':
        return client.list_todos()

    if command == 'create':
        if len(args) < 2:
            raise ValueError("create requires: title description [completed]")
        completed = parse_bool(args[2]) if len(args) > 2 else False
        return {"id": client.create_todo(args[0], args[1], completed)}

    if not args:
        raise ValueError(f"{command} requires a todo id")
    todo_id = args[0]

    if command == 'get':
        return client.get_todo(todo_id)
    if command == 'update':
        title = args[1] if len(args) > 1 else None
        description = args[2] if len(args) > 2 else None
        completed = parse_bool(args[3]) if len(args) > 3 else None
        return client.update_todo(todo_id, title, description, completed)
    if command == 'delete':
        client.delete_todo(todo_id)
        return {"deleted": todo_id}

    raise ValueError(f"Unknown command: {command}")


def main(argv=None):
    try:
        settings = get_settings()
        setup_logging(settings.log_level)
        args = parse_args(argv)

        if args.mode == 'server':
            import uvicorn
            from todokeeper.api.server import create_app

            logger.info(f"Starting server on {args.host}:{args.port} using {settings.todo_file}")
            uvicorn.run(create_app(), host=args.host, port=args.port)

        elif args.mode == 'cli':
            if not args.command:
                logger.error("Command required in CLI mode")
                sys.exit(1)

            client = TodoApiClient(args.url)
            result = run_command(client, args.command, args.args)
            print(json.dumps(result, indent=4))

    except (TodoApiError, requests.RequestException, ValueError) as e:
        logger.error(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
