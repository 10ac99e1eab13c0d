"""
Dialectic CLI - Command-line interface for the engine.

Usage:
    dialectic serve [--host H] [--port P]   Run the HTTP API
    dialectic scenarios                     List scenarios and choices
    dialectic enemies                       List enemies
    dialectic temptations                   List demon temptations
    dialectic rules [--rules-file F]        Print the effective rule tables
    dialectic check                         Validate the content library
"""

import argparse
import json
import sys

from .config import configure_logging, load_settings


def main(argv=None):
    """Main CLI entry point."""
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Dialectic - Philosophical RPG engine",
        prog="dialectic",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("scenarios", help="List scenarios and their choices")
    subparsers.add_parser("enemies", help="List enemies")
    subparsers.add_parser("temptations", help="List demon temptations")

    rules_parser = subparsers.add_parser("rules", help="Print the effective rule tables")
    rules_parser.add_argument("--rules-file", default=settings.rules_file, help="JSON overrides")

    subparsers.add_parser("check", help="Validate the content library")

    args = parser.parse_args(argv)
    configure_logging(args.log_level.upper())

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "scenarios":
        cmd_scenarios(args)
    elif args.command == "enemies":
        cmd_enemies(args)
    elif args.command == "temptations":
        cmd_temptations(args)
    elif args.command == "rules":
        cmd_rules(args)
    elif args.command == "check":
        cmd_check(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "dialectic.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


def cmd_scenarios(args):
    """List scenarios and their choices."""
    from .content import create_default_library

    library = create_default_library()
    for scenario in library.iter_scenarios():
        print(f"{scenario.scenario_id}: {scenario.title}")
        for choice in scenario.choices:
            reward = f" [+{choice.reward_item_id}]" if choice.reward_item_id else ""
            print(
                f"  - {choice.choice_id} ({choice.alignment_influence.value}, "
                f"{choice.authenticity_change:+g}){reward}"
            )


def cmd_enemies(args):
    """List enemies."""
    from .content import create_default_library

    library = create_default_library()
    for enemy in library.enemies.values():
        print(
            f"{enemy.enemy_id}: {enemy.name} ({enemy.difficulty.value}, "
            f"HP {enemy.max_hit_points}, weak to {enemy.weakness.value})"
        )


def cmd_temptations(args):
    """List demon temptations."""
    from .content import create_default_library

    library = create_default_library()
    for temptation in library.temptations.values():
        reward = f" [+{temptation.reward_item_id}]" if temptation.reward_item_id else ""
        print(
            f"{temptation.temptation_id}: {temptation.name} "
            f"(accept {temptation.accept_impact:+g}, reject {temptation.reject_impact:+g}){reward}"
        )


def cmd_rules(args):
    """Print the effective rule tables as JSON."""
    from .engine_core.rules import load_rules, rules_to_dict

    try:
        rules = load_rules(args.rules_file)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(json.dumps(rules_to_dict(rules), indent=2))


def cmd_check(args):
    """Validate the content library."""
    from .content import create_default_library, validate_library

    problems = validate_library(create_default_library())
    if problems:
        print("Content errors:")
        for problem in problems:
            print(f"  - {problem}")
        sys.exit(1)
    print("Content OK")


if __name__ == "__main__":
    main()
