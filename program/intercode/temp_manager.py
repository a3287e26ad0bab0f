class TemporaryManager:
    """
    Hands out compiler-generated temporary names for one translation.
    Names are never recycled, so every reduction writes a distinct temporary.
    """

    def __init__(self, prefix: str = 't'):
        self._prefix = prefix
        self._temp_counter = 0

    def new_temp(self) -> str:
        """
        Allocate a new temporary variable.

        Returns:
            str: Temporary variable name (e.g., 't1', 't2', etc.)
        """
        self._temp_counter += 1
        return f"{self._prefix}{self._temp_counter}"

    def is_temporary(self, var_name: str) -> bool:
        """
        Check if a variable name looks like a generated temporary.

        Args:
            var_name: Variable name to check

        Returns:
            bool: True if the variable is a temporary
        """
        suffix = var_name[len(self._prefix):]
        return var_name.startswith(self._prefix) and suffix.isdigit()

    def get_temp_count(self) -> int:
        """
        Get the total number of temporary variables created so far.

        Returns:
            int: Total temporary variable count
        """
        return self._temp_counter

    def reset(self) -> None:
        """Start numbering again from t1."""
        self._temp_counter = 0
