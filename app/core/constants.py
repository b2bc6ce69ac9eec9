"""Application constants.

Column selections, role names and board display strings.
"""

# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------
ADMIN_ROLE: str = "admin"
BEARER_PREFIX: str = "Bearer "

# ---------------------------------------------------------------------------
# Column selections (PostgREST ``select`` strings)
# ---------------------------------------------------------------------------
JOB_COLUMNS: str = "id, title"
CANDIDATE_COLUMNS: str = "id, job_id, name, linkedin_url, stage, created_at"

# ---------------------------------------------------------------------------
# Board display
# ---------------------------------------------------------------------------
MISSING_JOB_TITLE: str = "Job not found"
EMPTY_BOARD_MESSAGE: str = (
    "No candidates yet. Add one above; they will appear in Applied."
)
