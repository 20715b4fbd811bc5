"""Built-in yarn (berry) commands and their options.

Option lists come from the yarn CLI reference, in the order it documents them.
Bare words (version names, bump keywords) are offered like options.
"""

from .models import CommandTable

__all__ = ["PACKAGE_COMMANDS", "YARN_COMMANDS", "YARN_TABLE"]

YARN_COMMANDS: dict[str, list[str]] = {
    "add": [
        "--json",
        "--fixed",
        "--exact",
        "--tilde",
        "--caret",
        "--dev",
        "--peer",
        "--optional",
        "--prefer-dev",
        "--interactive",
        "--cached",
        "--mode",
    ],
    "bin": ["--verbose", "--json"],
    "cache clean": ["--mirror", "--all"],
    "config": ["--no-defaults", "--json"],
    "config get": ["--why", "--json", "--no-redacted"],
    "config set": ["--json", "--home"],
    "config unset": ["--home"],
    "constraints": ["--fix", "--json"],
    "constraints query": ["--json"],
    "constraints source": ["--verbose"],
    "dedupe": ["--strategy", "--check", "--json", "--mode"],
    "dlx": ["--package", "--quiet"],
    "dlx @yarnpkg/sdks vim": [],
    "dlx @yarnpkg/sdks base": [],
    "dlx @yarnpkg/sdks vscode": [],
    "exec": [],
    "explain": ["--json"],
    "explain peer-requirements": [],
    "info": [
        "--all",
        "--recursive",
        "--extra",
        "--cache",
        "--dependents",
        "--manifest",
        "--name-only",
        "--virtuals",
        "--json",
    ],
    "init": ["--private", "--workspace", "--install", "--name"],
    "install": [
        "--json",
        "--immutable",
        "--immutable-cache",
        "--refresh-lockfile",
        "--check-cache",
        "--check-resolutions",
        "--inline-builds",
        "--mode",
    ],
    "link": ["--all", "--private", "--relative"],
    "node": [],
    "npm audit": [
        "--all",
        "--recursive",
        "--environment",
        "--json",
        "--no-deprecations",
        "--severity",
        "--exclude",
        "--ignore",
    ],
    "npm info": ["--fields", "--json"],
    "npm login": ["--scope", "--publish", "--always-auth"],
    "npm logout": ["--scope", "--publish", "--all"],
    "npm publish": ["--access", "--tag", "--tolerate-republish", "--otp"],
    "npm tag add": [],
    "npm tag list": ["--json"],
    "npm tag remove": [],
    "npm whoami": ["--scope", "--publish"],
    "pack": ["--install-if-needed", "--dry-run", "--json", "--out"],
    "patch": ["--update", "--json"],
    "patch-commit": ["--save"],
    "plugin check": ["--json"],
    "plugin import": ["--checksum"],
    "plugin import from sources": ["--path", "--repository", "--branch", "--no-minify", "--force"],
    "plugin list": ["--json"],
    "plugin remove": [],
    "plugin runtime": ["--json"],
    "rebuild": [],
    "remove": ["--all", "--mode"],
    "run": ["--inspect", "--inspect-brk", "--top-level", "--binaries-only", "--require"],
    "search": [],
    "set resolution": [],
    "set version": [
        "--yarn-path",
        "--only-if-needed",
        # version names
        "latest",
        "canary",
        "classic",
        "4.x",
    ],
    "set version from sources": [
        "--path",
        "--repository",
        "--branch",
        "--plugin",
        "--dry-run",
        "--no-minify",
        "--force",
        "--skip-plugins",
    ],
    "stage": ["--commit", "--reset", "--dry-run"],
    "unlink": ["--all"],
    "unplug": ["--all", "--recursive", "--json"],
    "up": ["--interactive", "--fixed", "--exact", "--tilde", "--caret", "--recursive", "--mode"],
    "upgrade-interactive": [],
    "version": [
        "--deferred",
        "--immediate",
        # bump keywords
        "major",
        "minor",
        "patch",
        "premajor",
        "preminor",
        "prepatch",
        "prerelease",
        "decline",
    ],
    "version apply": ["--all", "--dry-run", "--prerelease", "--recursive", "--json"],
    "version check": ["--interactive"],
    "why": ["--recursive", "--json", "--peers"],
    "workspace": [],
    "workspaces focus": ["--json", "--production", "--all"],
    "workspaces foreach": [
        "--from",
        "--all",
        "--recursive",
        "--worktree",
        "--verbose",
        "--parallel",
        "--interlaced",
        "--jobs",
        "--topological",
        "--topological-dev",
        "--include",
        "--exclude",
        "--no-private",
        "--since",
        "--dry-run",
    ],
    "workspaces list": ["--since", "--recursive", "--no-private", "--verbose", "--json"],
}

# Commands taking dependency names of the local package.json as arguments
PACKAGE_COMMANDS = ("dedupe", "info", "npm info", "patch", "rebuild", "remove", "unplug", "up", "why")

YARN_TABLE = CommandTable.from_mapping(YARN_COMMANDS, package_commands=PACKAGE_COMMANDS)
