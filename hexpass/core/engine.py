"""
hexpass Engine
==============

Central orchestrator: validates a :class:`GenerateRequest`, resolves the
character length, and drives the generator.

This is the only place where cross-option rules are enforced.  The checks
run in a fixed order and the first violation is reported:

    1. length and ``--bytes`` together
    2. ``--count`` > 1 with ``--env``
    3. ``--count`` > 1 with ``--copy``
    4. ``--json`` with ``--count`` > 1
    5. ``--json`` with ``--env``
    6. ``--json`` with ``--copy``
    7. length / byte length parsing and maximum

Nothing is generated until every check has passed.
"""

from __future__ import annotations

from typing import Optional

from shared.config import HexpassConfig
from shared.logger import HexLogger

from hexpass.core.errors import UsageError
from hexpass.core.models import (
    DEFAULT_LENGTH,
    MAX_BYTES,
    MAX_LENGTH,
    GenerateRequest,
    GenerationResult,
    GenerationSpec,
)
from hexpass.generators.hex_generator import HexGenerator
from hexpass.parsers.args import parse_byte_length, parse_character_length


class HexpassEngine:
    """Resolves requests and generates secrets.

    Usage::

        engine = HexpassEngine()
        spec = engine.resolve(GenerateRequest(length_value="64"))
        result = engine.generate(spec)

    Attributes:
        config: hexpass configuration instance.
        generator: Hex generator used for every secret.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[HexpassConfig] = None,
        generator: Optional[HexGenerator] = None,
    ) -> None:
        self.config = config or HexpassConfig()
        self.generator = generator or HexGenerator()
        self.logger = HexLogger.from_config("engine", self.config)

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def resolve(self, request: GenerateRequest) -> GenerationSpec:
        """Validate *request* and compute the final generation parameters.

        Raises:
            UsageError: On the first violated rule.
        """
        with self.logger.operation("resolve"):
            self._check_combinations(request)

            byte_length: Optional[int] = None
            if request.bytes_value is not None:
                byte_length = parse_byte_length(request.bytes_value)
                if byte_length * 2 > MAX_LENGTH:
                    raise UsageError(
                        f"Byte length exceeds maximum of {MAX_BYTES} bytes "
                        f"({MAX_LENGTH} characters)."
                    )
                char_length = byte_length * 2
            elif request.length_value is not None:
                char_length = parse_character_length(request.length_value)
                if char_length > MAX_LENGTH:
                    raise UsageError(
                        f"Length exceeds maximum of {MAX_LENGTH} characters."
                    )
            else:
                char_length = DEFAULT_LENGTH

            spec = GenerationSpec(
                char_length=char_length,
                count=request.count,
                copy_secret=request.copy_secret,
                env_name=request.env_name,
                json_output=request.json_output,
                byte_length=byte_length,
            )
            self.logger.debug(
                "Resolved %d secret(s) of %d characters",
                spec.count,
                spec.char_length,
            )
            return spec

    @staticmethod
    def _check_combinations(request: GenerateRequest) -> None:
        if request.bytes_value is not None and request.length_value is not None:
            raise UsageError("Provide either a length or --bytes, not both.")

        if request.count > 1 and request.env_name is not None:
            raise UsageError(
                "The --env option is only supported for single secret "
                "generation (count=1)."
            )

        if request.count > 1 and request.copy_secret:
            raise UsageError("Copy is only supported for single secret.")

        if request.json_output and request.count > 1:
            raise UsageError(
                "JSON mode is only supported for single secret generation (count=1)."
            )

        if request.json_output and request.env_name is not None:
            raise UsageError(
                "JSON mode is not compatible with --env. "
                "Use JSON output directly for structured data."
            )

        if request.json_output and request.copy_secret:
            raise UsageError(
                "JSON mode is not compatible with --copy. "
                "Use JSON output for automation."
            )

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, spec: GenerationSpec) -> GenerationResult:
        """Generate ``spec.count`` independent secrets."""
        with self.logger.operation("generate"):
            with self.logger.timed(f"generate {spec.count} x {spec.char_length}"):
                secrets = self.generator.generate_many(spec.char_length, spec.count)
        return GenerationResult(spec=spec, secrets=tuple(secrets))

    def run(self, request: GenerateRequest) -> GenerationResult:
        """Resolve *request* and generate its secrets."""
        return self.generate(self.resolve(request))
