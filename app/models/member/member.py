"""Member (anggota DPR) model."""

MEMBER_DDL = """
CREATE TABLE IF NOT EXISTS member (
    id INTEGER PRIMARY KEY,
    province_id INTEGER,
    name VARCHAR,
    birthplace VARCHAR,
    birth_date VARCHAR,
    position VARCHAR,
    faction VARCHAR,
    address VARCHAR,
    remarks VARCHAR,
    age INTEGER,
    province VARCHAR,
    is_chair BOOLEAN NOT NULL DEFAULT FALSE,
    is_vice_chair BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

MEMBER_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_member_faction ON member(faction)",
    "CREATE INDEX IF NOT EXISTS idx_member_province ON member(province)",
]
