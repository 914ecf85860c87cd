"""Pull request operations through the gh CLI."""

from gun.gateway.github.github import GitHub as GitHub
