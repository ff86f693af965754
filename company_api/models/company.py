"""Company model."""

from sqlalchemy import Column, Enum, Integer, String

from company_api.database import Base
from company_api.models.enums import CompanyStatus
from company_api.models.mixins import TimestampMixin


class Company(Base, TimestampMixin):
    """Company record. Deletion flips ``status`` instead of removing the row."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, nullable=False)
    country = Column(String, nullable=False)
    website = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    status = Column(
        Enum(
            CompanyStatus,
            name="company_status",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
        default=CompanyStatus.ACTIVE,
        server_default=CompanyStatus.ACTIVE.value,
        index=True,
    )
