"""
Exception classes for the BambooHR client.

Request failures collapse into a single kind, BambooHRAPIError.
Configuration errors carry built-in guidance for the person running the code.
"""
import sys


class BambooHRAPIError(Exception):
    """Raised when a request to the BambooHR API fails for any reason.

    Network errors, non-2xx responses and malformed JSON bodies all end up
    here. The underlying exception is kept on ``cause`` and chained.
    """
    def __init__(self, cause: BaseException):
        super().__init__(f"Error fetching from BambooHR API: {cause}")
        self.cause = cause


class UnknownOperationError(KeyError):
    """Raised when an operation name is not in the endpoint table."""
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown BambooHR operation '{self.name}'"


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, setting_name: str = None, env_name: str = None):
        super().__init__(message)
        self.setting_name = setting_name
        self.env_name = env_name
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class MissingSettingException(ConfigException):
    """Raised when a required client setting cannot be resolved."""
    def __init__(self, message: str, setting_name: str, env_var: str, env_name: str = None):
        self.env_var = env_var
        super().__init__(message, setting_name=setting_name, env_name=env_name)

    def _generate_guidance(self):
        command = self._get_current_command()
        profile = f"profiles.{self.env_name}." if self.env_name else ""
        return f"""
❌ Setting '{self.setting_name}' is not configured
💡 Resolve this in one of the following ways:
   1. Set the environment variable: export {self.env_var}=<value>
   2. Or add '{profile}{self.setting_name}' to config/bamboohr.yaml and re-run: {command}
"""
