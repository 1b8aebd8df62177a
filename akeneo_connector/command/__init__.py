from .import_command import ImportCommand

COMMANDS = [ImportCommand]

__all__ = ["COMMANDS", "ImportCommand"]
