"""Constants for the project."""

from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Data directories
# ============================================================================
DATA_FOLDER = PROJECT_ROOT / "data"
REFERENCE_FASTA = DATA_FOLDER / "sars_spike_protein.fna"
QUERY_FASTA = DATA_FOLDER / "pfizer_mrna.fna"
REFERENCE_PROTEIN_FASTA = DATA_FOLDER / "sars_spike_protein.aa"
QUERY_PROTEIN_FASTA = DATA_FOLDER / "pfizer_mrna.aa"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# Alignment output files (from run_analysis.py)
ALIGNMENT_OUTPUT_FOLDER = RESULTS_FOLDER / "alignments"

# Summary table (from run_analysis.py)
REPORT_CSV = RESULTS_FOLDER / "report.csv"

# Score matrix heatmaps (from plot_score_matrix.py)
SCORE_MATRIX_FIGURES_FOLDER = RESULTS_FOLDER / "figures"

# ============================================================================
# Scoring parameters
# ============================================================================
GAP_PENALTY = -2
MISMATCH_PENALTY = -1
MATCH_SCORE = 1
SIGNIFICANCE_LEVEL = 0.05

# ============================================================================
# Preset analysis runs
# ============================================================================
ANALYSIS_RUNS: List[Dict[str, object]] = [
    {
        "name": "nucleotide_penalized",
        "description": "penalties for start/end gaps",
        "query": QUERY_FASTA,
        "reference": REFERENCE_FASTA,
        "sequence_type": "nucleotide",
        "unpenalized": False,
    },
    {
        "name": "nucleotide_unpenalized",
        "description": "free start/end gaps",
        "query": QUERY_FASTA,
        "reference": REFERENCE_FASTA,
        "sequence_type": "nucleotide",
        "unpenalized": True,
    },
    {
        "name": "aminoacid_penalized",
        "description": "translated amino acid sequences",
        "query": QUERY_PROTEIN_FASTA,
        "reference": REFERENCE_PROTEIN_FASTA,
        "sequence_type": "aminoacid",
        "unpenalized": False,
    },
]

# ============================================================================
# Plot styling
# ============================================================================
PATH_COLOR = "#A23B72"
PLOT_DPI = 300
PLOT_XLABEL_FONTSIZE = 12
PLOT_YLABEL_FONTSIZE = 12
PLOT_TITLE_FONTSIZE = 14
