"""Commit planning for commitcraft.

This package provides:
- models: CommitPlan, PlannedCommit, CommitDescription, ImpactInfo
- exceptions: PlanError, PlanPreconditionError, DuplicatePatchError, PlanFileError
- parser: parse_plan_response
- normalize: files_from_status_porcelain, normalize_plan_files, preview_commands
- validator: CommitMessageValidator, ValidationResult
- guard: DuplicateGuard
- render: format_description_body, render_commit_message, print_plan_human
- applier: ApplyReport, apply_plan
- files: load_plan_file, save_plan_file

Plan generation lives in commitcraft.plan.generator, which is not imported
here because it depends on the cache package, which depends on the models.
"""

# Models
from commitcraft.plan.models import (
    CommitDescription,
    CommitPlan,
    ImpactInfo,
    PlannedCommit,
)

# Exceptions
from commitcraft.plan.exceptions import (
    DuplicatePatchError,
    PlanError,
    PlanFileError,
    PlanPreconditionError,
)

# Parser
from commitcraft.plan.parser import parse_plan_response

# Normalizer
from commitcraft.plan.normalize import (
    files_from_status_porcelain,
    normalize_plan_files,
    preview_commands,
)

# Validator
from commitcraft.plan.validator import (
    CommitMessageValidator,
    ValidationResult,
)

# Duplicate guard
from commitcraft.plan.guard import DuplicateGuard

# Rendering
from commitcraft.plan.render import (
    format_description_body,
    print_plan_human,
    render_commit_message,
)

# Applier
from commitcraft.plan.applier import (
    ApplyReport,
    apply_plan,
)

# Plan files
from commitcraft.plan.files import (
    load_plan_file,
    save_plan_file,
)


__all__ = [
    # Models
    "CommitDescription",
    "CommitPlan",
    "ImpactInfo",
    "PlannedCommit",
    # Exceptions
    "DuplicatePatchError",
    "PlanError",
    "PlanFileError",
    "PlanPreconditionError",
    # Parser
    "parse_plan_response",
    # Normalizer
    "files_from_status_porcelain",
    "normalize_plan_files",
    "preview_commands",
    # Validator
    "CommitMessageValidator",
    "ValidationResult",
    # Guard
    "DuplicateGuard",
    # Rendering
    "format_description_body",
    "print_plan_human",
    "render_commit_message",
    # Applier
    "ApplyReport",
    "apply_plan",
    # Files
    "load_plan_file",
    "save_plan_file",
]
