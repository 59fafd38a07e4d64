#!/usr/bin/env python3
"""
code-nudger - find and track `// @reminder` annotations in source trees.
"""

import argparse
import logging
import sys

from code_nudger.core import ScanConfig
from code_nudger.core.config import load_config, save_config, get_default_config_path
from code_nudger.core.models import normalize_extensions
from code_nudger.commands import (
    ScanCommand,
    CheckCommand,
    TodayCommand,
    WatchCommand,
    CompleteCommand,
    ConfigCommand,
)


def _add_workspace_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--root',
        help='Workspace root to scan (default: configured workspace_root)'
    )
    parser.add_argument(
        '--ext',
        action='append',
        metavar='EXT',
        help='Scan only files with this extension (repeatable)'
    )
    parser.add_argument(
        '--exclude-dir',
        action='append',
        metavar='NAME',
        help='Skip directories with this name (repeatable, replaces the configured list)'
    )


def _apply_overrides(config: ScanConfig, args: argparse.Namespace) -> None:
    """Apply one-run CLI overrides to the loaded config."""
    if getattr(args, 'ext', None):
        config.include_extensions = normalize_extensions(args.ext)
    if getattr(args, 'exclude_dir', None):
        config.exclude_dirs = list(args.exclude_dir)


def main(argv=None):
    """Main entry point for code-nudger."""
    parser = argparse.ArgumentParser(
        description="Track reminder annotations left in source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Annotation format:
  // @reminder YYYY-MM-DD [HH:MM]: Reminder message

Examples:
  code-nudger scan --root .          # Scan a workspace and report due reminders
  code-nudger today                  # Reminders scheduled for today
  code-nudger check src/app.py       # Rescan a single file
  code-nudger watch                  # Rescan files as they are saved
  code-nudger complete "  @rem"      # Snippet suggestion for an editor
        """
    )

    default_config = get_default_config_path()

    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {default_config})',
        default=None
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Scan command
    scan_parser = subparsers.add_parser('scan', help='Scan the whole workspace')
    _add_workspace_arguments(scan_parser)
    scan_parser.add_argument(
        '--export',
        metavar='PATH',
        help='Export reminders to a JSON file'
    )
    scan_parser.add_argument(
        '--today',
        action='store_true',
        help="Show today's reminders after scanning"
    )

    # Check command
    check_parser = subparsers.add_parser('check', help='Scan individual files')
    check_parser.add_argument(
        'files',
        nargs='+',
        metavar='FILE',
        help='Files to scan'
    )

    # Today command
    today_parser = subparsers.add_parser('today', help='Show reminders scheduled for today')
    _add_workspace_arguments(today_parser)
    today_parser.add_argument(
        '--date',
        help='Day to show (YYYY-MM-DD, default: today)'
    )

    # Watch command
    watch_parser = subparsers.add_parser('watch', help='Rescan files as they change')
    _add_workspace_arguments(watch_parser)
    watch_parser.add_argument(
        '--interval',
        type=float,
        help='Seconds between polls (default: configured watch interval)'
    )
    watch_parser.add_argument(
        '--cycles',
        type=int,
        help='Stop after this many polls'
    )

    # Complete command
    complete_parser = subparsers.add_parser('complete', help='Suggest the reminder snippet')
    complete_parser.add_argument(
        'prefix',
        help='Text of the current line up to the cursor'
    )
    complete_parser.add_argument('--date', help='Fill the date placeholder')
    complete_parser.add_argument('--time', help='Fill the time placeholder')
    complete_parser.add_argument('--message', help='Fill the message placeholder')

    # Config command
    config_parser = subparsers.add_parser('config', help='Show or edit configuration')
    config_parser.add_argument(
        '--show',
        action='store_true',
        help='Print the configuration'
    )
    config_parser.add_argument(
        '--set-root',
        metavar='PATH',
        help='Persist the default workspace root'
    )
    config_parser.add_argument(
        '--add-ext',
        action='append',
        metavar='EXT',
        help='Add a file extension to scan (repeatable)'
    )
    config_parser.add_argument(
        '--remove-ext',
        action='append',
        metavar='EXT',
        help='Stop scanning a file extension (repeatable)'
    )
    config_parser.add_argument(
        '--prune-on-rescan',
        choices=['on', 'off'],
        help='Drop stale reminders of a file before rescanning it'
    )

    args = parser.parse_args(argv)

    # Configure logging if verbose mode is enabled
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        return 1

    try:
        # Completion runs on every keystroke, skip config loading
        if args.command == 'complete':
            cmd = CompleteCommand(verbose=args.verbose)
            success = cmd.run(
                args.prefix,
                date_str=args.date,
                time_str=args.time,
                message=args.message
            )
            return 0 if success else 1

        config = load_config(args.config)

        if args.verbose:
            actual_config_path = args.config if args.config else get_default_config_path()
            print(f"Using config: {actual_config_path}")

        _apply_overrides(config, args)

        if args.command == 'scan':
            cmd = ScanCommand(config, verbose=args.verbose)
            success = cmd.run(root=args.root, export_json=args.export, show_today=args.today)

        elif args.command == 'check':
            cmd = CheckCommand(config, verbose=args.verbose)
            success = cmd.run(args.files)

        elif args.command == 'today':
            cmd = TodayCommand(config, verbose=args.verbose)
            success = cmd.run(root=args.root, date_str=args.date)

        elif args.command == 'watch':
            cmd = WatchCommand(config, verbose=args.verbose)
            success = cmd.run(root=args.root, interval=args.interval, cycles=args.cycles)

        elif args.command == 'config':
            cmd = ConfigCommand(config, verbose=args.verbose)
            success = cmd.run(
                show=args.show,
                set_root=args.set_root,
                add_ext=args.add_ext,
                remove_ext=args.remove_ext,
                prune_on_rescan=args.prune_on_rescan
            )
            if success and cmd.changed:
                save_config(config, args.config)

        else:
            print(f"Unknown command '{args.command}'.")
            return 1

        return 0 if success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        print(f"Error: {e}")
        if not args.verbose:
            print("Re-run with --verbose for more detail.")
        else:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
