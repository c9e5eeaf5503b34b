import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import db
# Tüm modelleri tek seferde import et
from app.models import *

def main():
    """Create all database tables"""
    db.init_db()
    Base.metadata.create_all(bind=db.engine)
    print("All tables created successfully.")

if __name__ == "__main__":
    main()
