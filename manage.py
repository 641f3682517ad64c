#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'snapchef.settings')
    try:
        from django.core.management import execute_from_command_line
        from django.core.management.commands.runserver import Command as RunServer
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    RunServer.default_port = os.getenv("APP_PORT", "8080")
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
