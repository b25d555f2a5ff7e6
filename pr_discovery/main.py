#!/usr/bin/env python3
"""
Origin PR Discovery - Main Entry Point

Scans a GitHub repository for pull requests opened from its own branches,
decides which checkout strategies apply and whether each head is trusted,
and drops pull requests that modify the pipeline file when asked to.

Usage:
    python -m pr_discovery.main scan --repo owner/repo --strategy-id 4 --trusted-author ci-bot
"""

import argparse
import logging
import sys
from typing import List

from github import GithubException

from .config import DiscoveryConfig
from .discovery import BuildCandidate, OriginPullRequestDiscoveryTrait, SourceScanner
from .models import HeadCategory, LookupFailurePolicy, strategy_options
from .tools import GitHubTool
from .utils import setup_logging, get_logger


def run_scan(config: DiscoveryConfig) -> List[BuildCandidate]:
    """
    Scan a repository for buildable origin pull requests.

    Args:
        config: Discovery configuration

    Returns:
        Build candidates in pull request order
    """
    logger = get_logger()
    config.validate()

    logger.info(f"Starting scan of {config.repo} (strategy id {config.strategy_id})")

    github = GitHubTool(repo=config.repo, token=config.github_token)
    scanner = SourceScanner(
        github.repository,
        traits=[OriginPullRequestDiscoveryTrait.from_config(config)],
        categories=[HeadCategory.CHANGE_REQUEST],
        base=config.base,
    )
    return scanner.scan()


def format_candidates(candidates: List[BuildCandidate]) -> str:
    """Render candidates as a plain text table."""
    if not candidates:
        return "No buildable pull requests."
    lines = []
    for c in candidates:
        trust = "trusted" if c.trusted else "untrusted"
        lines.append(f"{c.name:<16} {c.strategy.value:<6} {trust:<10} {c.head.source_branch} -> {c.head.target_branch}")
    return "\n".join(lines)


def build_config(args) -> DiscoveryConfig:
    """Environment config with command line overrides applied."""
    config = DiscoveryConfig.from_env()

    if args.repo:
        config.repo = args.repo
    if args.base:
        config.base = args.base
    if args.strategy_id is not None:
        config.strategy_id = args.strategy_id
    if args.trusted_author:
        config.trusted_authors = tuple(args.trusted_author)
    if args.pipeline_file:
        config.pipeline_file = args.pipeline_file
    if args.fail_closed:
        config.lookup_failure_policy = LookupFailurePolicy.EXCLUDE.value
    return config


def cmd_scan(args):
    """Handle 'scan' subcommand."""
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO)
    logger = get_logger()

    try:
        config = build_config(args)
        candidates = run_scan(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except (GithubException, OSError) as e:
        logger.error(f"GitHub API error: {e}")
        sys.exit(1)

    print("\n=== Build Candidates ===")
    print(format_candidates(candidates))
    sys.exit(0)


def cmd_strategies(args):
    """Handle 'strategies' subcommand."""
    for label, value in strategy_options():
        print(f"{value}: {label}")


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Discover pull requests from origin branches of a GitHub repository"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="Scan a repository for buildable PRs")
    scan_parser.add_argument(
        "--repo",
        type=str,
        help="Repository in format owner/repo"
    )
    scan_parser.add_argument(
        "--base",
        type=str,
        help="Only consider PRs targeting this branch"
    )
    scan_parser.add_argument(
        "--strategy-id",
        type=int,
        choices=[0, 1, 2, 3, 4],
        help="Checkout strategy id (see 'strategies'; default: 1)"
    )
    scan_parser.add_argument(
        "--trusted-author",
        action="append",
        help="Author allowed to modify the pipeline file (repeatable)"
    )
    scan_parser.add_argument(
        "--pipeline-file",
        type=str,
        help="Pipeline file checked by strategy 4 (default: Jenkinsfile)"
    )
    scan_parser.add_argument(
        "--fail-closed",
        action="store_true",
        help="Exclude PRs whose author or files cannot be read"
    )
    scan_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    # strategies command
    subparsers.add_parser("strategies", help="List checkout strategy ids")

    args = parser.parse_args()

    # Route to subcommand
    if args.command == "scan":
        cmd_scan(args)
    elif args.command == "strategies":
        cmd_strategies(args)
    else:
        # No subcommand - show help
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    main()
