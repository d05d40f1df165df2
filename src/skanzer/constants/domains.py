"""Domain allowlist constants."""

from __future__ import annotations

DEFAULT_ALLOWLISTED_DOMAINS: tuple[str, ...] = (
    "github.com",
    "gitlab.com",
    "bitbucket.org",
    "npmjs.com",
    "registry.npmjs.org",
    "pypi.org",
    "crates.io",
    "rubygems.org",
    "stackoverflow.com",
    "wikipedia.org",
    "developer.mozilla.org",
    "medium.com",
    "dev.to",
    "youtube.com",
    "reddit.com",
    "discord.com",
    "slack.com",
    "x.com",
    "twitter.com",
    "claude.ai",
    "anthropic.com",
    "vercel.com",
    "netlify.com",
    "supabase.com",
    "nodejs.org",
    "python.org",
    "rust-lang.org",
    "go.dev",
    "nextjs.org",
    "reactjs.org",
    "tailwindcss.com",
    "typescriptlang.org",
)

# Hosts beginning with any of these labels are treated as documentation sites.
ALLOWLISTED_HOST_PREFIXES: tuple[str, ...] = ("docs.",)
