"""gun: commit, branch, push and open pull requests from one prompt-driven command."""
