"""Git operations issued through the process runner."""

from gun.gateway.git.git import Git as Git
