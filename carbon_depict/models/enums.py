"""Named levels, categories and statuses for all calculation records."""

import enum


# ── Disclosure ───────────────────────────────────────────────────────────────


class DisclosureStatus(str, enum.Enum):
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    UNDER_REVIEW = "under_review"
    SUBMITTED = "submitted"
    PUBLISHED = "published"


# ── Materiality ──────────────────────────────────────────────────────────────


class MaterialityMethodology(str, enum.Enum):
    SINGLE = "single"
    DOUBLE = "double"
    DYNAMIC = "dynamic"


class TopicCategory(str, enum.Enum):
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"


class StakeholderConcern(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class MaterialityPriority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AssessmentStatus(str, enum.Enum):
    DRAFT = "draft"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    PUBLISHED = "published"
    ARCHIVED = "archived"


# ── Risk ─────────────────────────────────────────────────────────────────────


class Likelihood(str, enum.Enum):
    RARE = "rare"
    UNLIKELY = "unlikely"
    POSSIBLE = "possible"
    LIKELY = "likely"
    ALMOST_CERTAIN = "almost_certain"


class Impact(str, enum.Enum):
    INSIGNIFICANT = "insignificant"
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CATASTROPHIC = "catastrophic"


class ControlEffectiveness(str, enum.Enum):
    NOT_EFFECTIVE = "not_effective"
    PARTIALLY_EFFECTIVE = "partially_effective"
    EFFECTIVE = "effective"
    HIGHLY_EFFECTIVE = "highly_effective"


class ControlType(str, enum.Enum):
    PREVENTIVE = "preventive"
    DETECTIVE = "detective"
    CORRECTIVE = "corrective"
    DIRECTIVE = "directive"


class ImplementationStatus(str, enum.Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    IMPLEMENTED = "implemented"
    UNDER_REVIEW = "under_review"


class RiskType(str, enum.Enum):
    PHYSICAL = "physical"
    TRANSITION = "transition"
    LIABILITY = "liability"
    STRATEGIC = "strategic"
    OPERATIONAL = "operational"
    REPUTATIONAL = "reputational"
    COMPLIANCE = "compliance"


class RiskCategory(str, enum.Enum):
    CLIMATE = "climate"
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"
    FINANCIAL = "financial"


class RiskStatus(str, enum.Enum):
    IDENTIFIED = "identified"
    UNDER_REVIEW = "under_review"
    MITIGATED = "mitigated"
    ACCEPTED = "accepted"
    TRANSFERRED = "transferred"
    CLOSED = "closed"


class TimeHorizon(str, enum.Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


# ── PCAF ─────────────────────────────────────────────────────────────────────


class AssetClass(str, enum.Enum):
    LISTED_EQUITY = "listed_equity"
    CORPORATE_BONDS = "corporate_bonds"
    BUSINESS_LOANS = "business_loans"
    PROJECT_FINANCE = "project_finance"
    COMMERCIAL_REAL_ESTATE = "commercial_real_estate"
    MORTGAGES = "mortgages"
    MOTOR_VEHICLES = "motor_vehicles"
    UNLISTED_EQUITY = "unlisted_equity"


class CompanyValueType(str, enum.Enum):
    EVIC = "EVIC"
    TOTAL_ASSETS = "total_assets"
    TOTAL_EQUITY = "total_equity"


class PortfolioType(str, enum.Enum):
    LOANS = "loans"
    INVESTMENTS = "investments"
    PROJECT_FINANCE = "project_finance"
    INSURANCE = "insurance"
    MIXED = "mixed"


class AttributionPolicy(str, enum.Enum):
    CLAMP = "clamp"
    REJECT = "reject"


class AssessmentWorkflowStatus(str, enum.Enum):
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PUBLISHED = "published"


# ── Targets ──────────────────────────────────────────────────────────────────


class TargetType(str, enum.Enum):
    ABSOLUTE = "absolute"
    INTENSITY = "intensity"
    QUALITATIVE = "qualitative"


class TargetStatus(str, enum.Enum):
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    OFF_TRACK = "off_track"
    ACHIEVED = "achieved"
    ABANDONED = "abandoned"
    REVISED = "revised"


# ── SBTi ─────────────────────────────────────────────────────────────────────


class SubmissionStatus(str, enum.Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    VALIDATED = "validated"
    REJECTED = "rejected"
    EXPIRED = "expired"


class TemperatureAlignment(str, enum.Enum):
    ONE_POINT_FIVE = "1.5C"
    WELL_BELOW_TWO = "well_below_2C"
    TWO = "2C"
