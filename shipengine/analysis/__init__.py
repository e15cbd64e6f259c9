"""
SHIPENGINE Analysis

Formula calibration harness over the historical vessel dataset.
"""

from .vessels import (
    PropulsionTypeProfile,
    PROPULSION_TYPE_PROFILES,
    HydrodynamicValues,
    VesselSpecification,
    VESSELS,
    VESSELS_1960S,
    BUILTIN_DATASETS,
    validate_vessel,
    validate_dataset,
    load_vessel_dataset,
    resolve_vessel_dataset,
    vessels_by_displacement_range,
    vessels_by_propulsion,
    vessels_by_vessel_type,
    average_power_to_displacement,
    hull_form_resistance_factor,
    admiralty_coefficient_by_year,
    aggregate_propulsion_efficiency,
    estimate_power,
)

from .displacement_factors import (
    DisplacementFactor,
    DISPLACEMENT_FACTORS,
    CoefficientAnalysis,
    get_displacement_factor,
    apply_displacement_adjustment,
    analyze_admiralty_coefficient,
)

from .formulas import (
    PowerFormula,
    admiralty_power,
    default_formulas,
    extended_formulas,
)

from .calibration import (
    VesselPrediction,
    FormulaEvaluation,
    RankingReport,
    ClassCoefficient,
    CalibrationReport,
    EfficiencyTier,
    run_formula_comparison,
    run_calibration,
    compute_class_coefficients,
    normalized_admiralty_coefficient,
    recommendation_verdict,
)

from .report import format_calibration_report, format_ranking

__all__ = [
    # Dataset
    "PropulsionTypeProfile",
    "PROPULSION_TYPE_PROFILES",
    "HydrodynamicValues",
    "VesselSpecification",
    "VESSELS",
    "VESSELS_1960S",
    "BUILTIN_DATASETS",
    "validate_vessel",
    "validate_dataset",
    "load_vessel_dataset",
    "resolve_vessel_dataset",
    "vessels_by_displacement_range",
    "vessels_by_propulsion",
    "vessels_by_vessel_type",
    "average_power_to_displacement",
    "hull_form_resistance_factor",
    "admiralty_coefficient_by_year",
    "aggregate_propulsion_efficiency",
    "estimate_power",
    # Displacement factors
    "DisplacementFactor",
    "DISPLACEMENT_FACTORS",
    "CoefficientAnalysis",
    "get_displacement_factor",
    "apply_displacement_adjustment",
    "analyze_admiralty_coefficient",
    # Formulas
    "PowerFormula",
    "admiralty_power",
    "default_formulas",
    "extended_formulas",
    # Calibration
    "VesselPrediction",
    "FormulaEvaluation",
    "RankingReport",
    "ClassCoefficient",
    "CalibrationReport",
    "EfficiencyTier",
    "run_formula_comparison",
    "run_calibration",
    "compute_class_coefficients",
    "normalized_admiralty_coefficient",
    "recommendation_verdict",
    # Report
    "format_calibration_report",
    "format_ranking",
]
