"""Configuration dataclass for the distribution evaluator."""

from dataclasses import dataclass, asdict
import json


@dataclass
class EvaluatorConfig:
    """Settings for a hash distribution run."""

    # Input
    dictionary_path: str = "./words.txt"

    # Rendering
    histogram_width: int = 70
    histogram_height: int = 10
    show_histogram: bool = True
    fill_char: str = "#"

    def validate(self) -> list[str]:
        """
        Validate parameter ranges and return a list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.dictionary_path:
            errors.append("dictionary_path must not be empty")

        if self.histogram_width < 2:
            errors.append(f"histogram_width must be >= 2, got {self.histogram_width}")
        if self.histogram_height < 1:
            errors.append(f"histogram_height must be >= 1, got {self.histogram_height}")
        if len(self.fill_char) != 1:
            errors.append(f"fill_char must be a single character, got '{self.fill_char}'")

        return errors

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, d: dict) -> "EvaluatorConfig":
        return cls(**d)

    @classmethod
    def from_json(cls, json_str: str) -> "EvaluatorConfig":
        d = json.loads(json_str)
        return cls.from_dict(d)
