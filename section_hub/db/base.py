# /section_hub/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# that Base.metadata knows every table before create_all() or an Alembic scan.

from .base_class import Base

from .models.section_models import Teacher, Student, Announcement, Material, Timetable
