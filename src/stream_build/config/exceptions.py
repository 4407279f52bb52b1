"""
Exception classes with built-in guidance for build configuration access.
"""
import sys
from typing import List


class ConfigException(Exception):
    """Base exception for all build configuration errors."""
    def __init__(self, message: str, error_type: str = None, field_name: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.field_name = field_name
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Build configuration error: {self}
💡 Check the requested value and try again
"""


class UnknownFieldException(ConfigException):
    """Raised when a caller asks for a field the build configuration does not define."""
    def __init__(self, field_name: str, available_fields: List[str]):
        self.available_fields = list(available_fields)
        super().__init__(
            f"Field '{field_name}' is not defined in the build configuration. "
            f"Available fields: {', '.join(self.available_fields)}",
            error_type="unknown_field",
            field_name=field_name,
        )

    def _generate_guidance(self):
        command = self._get_current_command()
        fields = '\n'.join(f"   • {name}" for name in self.available_fields)
        return f"""
❌ Field '{self.field_name}' is not part of the build configuration
💡 Ask for one of the defined fields instead:
{fields}
   Print every value with: invoke -c stream_build show-config
   (failed command: {command})
"""
