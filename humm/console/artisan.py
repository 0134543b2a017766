"""
Artisan
Laravel-style CLI discovering Command classes
"""
import importlib
import importlib.util
import inspect
import pkgutil
import sys
import traceback
from types import ModuleType
from typing import Dict, List, Tuple

from humm.console.command import Command
from humm.support import Storage


class Artisan:

    # Package holding the framework commands
    COMMANDS_PACKAGE = 'humm.console.commands'

    # Directory (under the base path) holding application commands
    APP_COMMANDS_DIR = 'console'

    def __init__(self):
        self.commands: Dict[str, Command] = {}
        self._discover_commands()

    def _discover_commands(self):
        """Auto-discover framework and application commands"""
        package = importlib.import_module(self.COMMANDS_PACKAGE)
        for module_info in pkgutil.iter_modules(package.__path__):
            self._register_module(importlib.import_module(f'{self.COMMANDS_PACKAGE}.{module_info.name}'))

        app_commands = Storage.base(self.APP_COMMANDS_DIR)
        if not app_commands.is_dir():
            return

        for py_file in sorted(app_commands.glob('*.py')):
            if py_file.name.startswith('__'):
                continue

            spec = importlib.util.spec_from_file_location(f'app_console_{py_file.stem}', py_file)
            if spec and spec.loader:
                module = importlib.util.module_from_spec(spec)
                spec.loader.exec_module(module)
                self._register_module(module)

    def _register_module(self, module: ModuleType):
        """Register every Command subclass defined in a module"""
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, Command) and obj is not Command and obj.name:
                self.commands[obj.name] = obj()

    def show_help(self):
        """Show available commands"""
        print("Humm - convention-based views")
        print()

        if not self.commands:
            print("No commands available.")
            return

        categories: Dict[str, List[Command]] = {}
        for name, cmd in self.commands.items():
            category = name.split(':')[0] if ':' in name else 'general'
            categories.setdefault(category, []).append(cmd)

        for category in sorted(categories.keys()):
            print(f"{category.upper()}:")
            for cmd in sorted(categories[category], key=lambda c: c.name):
                print(f"  {cmd.signature:<35} {cmd.description}")
            print()

        print("Run 'humm help <command>' for detailed information")

    def run(self, argv) -> int:
        """Run the CLI application"""
        if len(argv) < 2:
            self.show_help()
            return 0

        command_name = argv[1]

        if command_name in ['help', '--help', '-h']:
            if len(argv) > 2:
                cmd_name = argv[2]
                if cmd_name in self.commands:
                    cmd = self.commands[cmd_name]
                    print(f"\nCommand: {cmd.name}")
                    print(f"Description: {cmd.description}")
                    print(f"Signature: {cmd.signature}")
                    return 0
                print(f"Unknown command: {cmd_name}\n")
                self.show_help()
                return 1
            self.show_help()
            return 0

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        command = self.commands[command_name]
        args, kwargs = self._parse_args(argv[2:])

        try:
            exit_code = command.handle(*args, **kwargs)
            return exit_code if exit_code is not None else 0
        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130
        except Exception as e:
            print(f"\n❌ Error executing command: {e}\n")
            traceback.print_exc()
            return 1

    def _parse_args(self, argv) -> Tuple[list, dict]:
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        for arg in argv:
            if arg.startswith('--'):
                # Long option (--verbose, --name=value)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    try:
                        kwargs[key] = int(value)
                    except ValueError:
                        if value.lower() in ('true', 'false'):
                            kwargs[key] = value.lower() == 'true'
                        else:
                            kwargs[key] = value
                else:
                    kwargs[arg[2:]] = True
            elif arg.startswith('-'):
                kwargs[arg[1:]] = True
            else:
                args.append(arg)

        return args, kwargs


def main():
    """Console entry point"""
    sys.exit(Artisan().run(sys.argv))
