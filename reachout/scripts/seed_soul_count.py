import logging
from reachout.core.database import db
from reachout.models.soul_count import SoulCount

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def seed_soul_count(initial: int = 0) -> int:
    "Make sure the singleton soul count row exists; returns its count"
    with db.session() as session:
        row = session.query(SoulCount).first()
        if row is not None:
            logger.info(f"Soul count already present: {row.count}")
            return row.count

        session.add(SoulCount(count=initial))
        logger.info(f"Soul count seeded with {initial}")
        return initial

if __name__ == "__main__":
    db.init_db()
    seed_soul_count()
