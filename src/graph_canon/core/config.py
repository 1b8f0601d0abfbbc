# src/graph_canon/core/config.py
"""
Configuration schema and loading for the canonicalizer.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.

Both budgets default to None (unbounded), which keeps canonical forms exact.
Setting a budget trades exactness for bounded running time: an exhausted
budget degrades to a best-effort canonical form that can report false
"not isomorphic" results on highly symmetric graphs.
"""

from pathlib import Path

from pydantic import BaseModel, Field


class CanonicalizerSettings(BaseModel):
    """Budgets for the canonicalization search.

    Example YAML:
        max_refinement_rounds: 10
        max_permutations: 40320   # 8!

    Environment overrides: GRAPH_CANON_MAX_PERMUTATIONS=5040
    """

    model_config = {"frozen": True}

    max_refinement_rounds: int | None = Field(
        default=None,
        gt=0,
        description="Cap on colour refinement rounds (default: node count, which always suffices)",
    )
    max_permutations: int | None = Field(
        default=None,
        gt=0,
        description="Cap on candidate node orders tried when breaking signature ties (default: unbounded)",
    )


def load_settings(config_path: Path | None = None) -> CanonicalizerSettings:
    """Load settings from an optional YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (GRAPH_CANON_*) - highest priority
    2. Config file (if given)
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file, or None for env-only

    Returns:
        Validated CanonicalizerSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="GRAPH_CANON",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf returns uppercase keys; only pass through fields the model knows
    known = set(CanonicalizerSettings.model_fields)
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k.lower() in known}

    return CanonicalizerSettings(**raw_config)
