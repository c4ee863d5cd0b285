"""GitHub Actions runtime and REST API support.

The runner hands the step its event context through environment
variables, receives outputs through the ``GITHUB_OUTPUT`` file and reads
workflow commands from stdout.
"""
