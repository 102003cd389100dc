"""Shared fixtures: in-memory member database."""

import pytest

from app.container import container
from app.repositories.db import MEMORY, connect
from app.repositories.member import MemberRepository
from app.repositories.stats import StatsRepository
from app.services.members import MemberService
from app.services.stats import StatsService

INSERT = """
INSERT INTO member (id, province_id, name, birthplace, birth_date, position, faction,
                    address, remarks, age, province, is_chair, is_vice_chair)
VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

MEMBERS = [
    (1, 11, "Hj. Siti Aminah", "Jakarta", "1970-03-02", "Anggota", "PDI Perjuangan",
     "Jl. Ahmad Yani 1", None, 54, "DKI Jakarta", False, False),
    (2, 12, "H. Ahmad Sahroni", "Medan", "1977-08-08", "Ketua Komisi III", "Partai NasDem",
     "Jl. Merdeka 2", "Dapil Sumut I", 47, "Sumatera Utara", True, False),
    (3, 13, "Budi Santoso", "Bandung", "1984-01-15", "Wakil Ketua Komisi I", "Partai Golkar",
     "Jl. Braga 3", None, 40, "Jawa Barat", False, True),
    (4, 13, "Rizky Pratama", "Bogor", "1995-05-05", "Anggota", "-",
     "Jl. Pajajaran 4", None, 29, "Jawa Barat", False, False),
    (5, None, 'Yohanes "Joe" Tan', "Surabaya", None, "Anggota", None,
     None, None, None, None, False, False),
    (6, 14, "Dewi Lestari", "Semarang", "1983-02-02", "Anggota", "Partai Gerindra",
     "Jl. Pemuda 6", None, 41, "Jawa Tengah", False, False),
    (7, 14, "Kartono", "Solo", "1963-07-07", "", "",
     "Jl. Slamet Riyadi 7", None, 61, "Jawa Tengah", False, False),
    (8, 15, "Bambang Wuryanto", "Yogyakarta", "1989-09-09", "Anggota", "Fraksi Ahmad Dahlan",
     "Jl. Malioboro 8", None, 35, "DI Yogyakarta", False, False),
]


@pytest.fixture
def sample_members():
    return MEMBERS


@pytest.fixture
def db():
    """Empty in-memory database with the member table."""
    conn = connect(MEMORY)
    yield conn
    conn.close()


@pytest.fixture
def seeded_db(db):
    """Database holding the sample members."""
    db.executemany(INSERT, MEMBERS)
    return db


GENERATE = """
INSERT INTO member (id, name, faction, age, is_chair, is_vice_chair)
SELECT i, 'Member ' || lpad(i::VARCHAR, 3, '0'), 'Fraksi ' || (i % 3)::VARCHAR, 25 + (i % 40),
       i <= {chairs}, i > {chairs} AND i <= {leaders}
FROM range(1, {n} + 1) t(i)
"""


@pytest.fixture
def make_members(db):
    """Fill the empty database with n generated members; the first ids are chairs, then vice-chairs."""

    def make(n: int, chairs: int = 0, vice_chairs: int = 0):
        db.execute(GENERATE.format(n=int(n), chairs=int(chairs), leaders=int(chairs + vice_chairs)))
        return db

    return make


@pytest.fixture
def member_repo(seeded_db):
    return MemberRepository(seeded_db)


@pytest.fixture
def stats_repo(seeded_db):
    return StatsRepository(seeded_db)


@pytest.fixture
def member_service(member_repo):
    return MemberService(member_repo=member_repo)


@pytest.fixture
def stats_service(stats_repo):
    return StatsService(stats_repo=stats_repo)


@pytest.fixture
def wired(seeded_db):
    """Global container wired to the seeded database."""
    container.close()
    container.init(db=seeded_db)
    yield container
    container.close()
