import logging
from sqlalchemy import text
from reachout.core.database import db
from reachout.models.user import User, UserRole, UserStatus
from reachout.core.security import get_password_hash
from reachout.core.config import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def verify_database_connection():
    """Check if database is accessible"""
    try:
        with db.session() as session:
            session.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False

def create_tables():
    """Create database tables"""
    try:
        db.init_db()
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

def create_superuser(email=None, password=None, full_name="Super Admin"):
    """Create the first operator from arguments or environment variables"""
    email = email or settings.FIRST_SUPERUSER
    password = password or settings.FIRST_SUPERUSER_PASSWORD
    if not email or not password:
        logger.error("FIRST_SUPERUSER and FIRST_SUPERUSER_PASSWORD must be set")
        return False

    try:
        if not verify_database_connection():
            logger.error("Cannot create superuser: Database not accessible")
            return False

        with db.session() as session:
            existing_user = session.query(User).filter(User.email == email).first()

            if existing_user:
                logger.info(f"Superuser {email} already exists")
                return True

            superuser = User(
                email=email,
                full_name=full_name,
                hashed_password=get_password_hash(password),
                role=UserRole.SUPER_ADMIN,
                status=UserStatus.ACTIVE,
            )

            session.add(superuser)
            logger.info(f"Superuser {email} created successfully")
            return True

    except Exception as e:
        logger.error(f"Failed to create superuser: {e}")
        return False

def verify_superuser(email=None):
    """Verify that superuser was created"""
    email = email or settings.FIRST_SUPERUSER
    try:
        with db.session() as session:
            superuser = session.query(User).filter(User.email == email).first()

            if superuser:
                logger.info(f"Verified superuser: {superuser.email} (role: {superuser.role})")
                return True

            logger.error("Superuser verification failed: User not found")
            return False

    except Exception as e:
        logger.error(f"Failed to verify superuser: {e}")
        return False

if __name__ == "__main__":
    logger.info("Starting superuser creation process...")

    try:
        create_tables()

        if create_superuser():
            if verify_superuser():
                logger.info("Superuser creation process completed successfully")
                exit(0)

        logger.error("Superuser creation process failed")
        exit(1)

    except Exception as e:
        logger.error(f"An error occurred: {e}")
        exit(1)
