from .executor import ShellCommandExecutor

__all__ = ["ShellCommandExecutor"]
