"""yarncomp - shell tab-completion for the yarn command line.

Invoked by the shell once per completion event, it resolves the word under the
cursor against a table of yarn subcommands and their options, plus the script
and dependency names declared in the local package.json.
"""
