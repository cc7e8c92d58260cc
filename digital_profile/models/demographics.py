"""
Demographics SQLAlchemy models.
Population counts by caste, age, gender, religion, occupation and ward.
"""
from sqlalchemy import Column, Integer, String, Text, Numeric, UniqueConstraint, Index
from digital_profile.database import Base
from digital_profile.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class CastePopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Male and female population per caste / ethnic group."""
    __tablename__ = "caste_population"

    caste_type = Column(String(100), nullable=False, unique=True, index=True)
    male_population = Column(Integer, nullable=False, default=0)
    female_population = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<CastePopulation(caste_type={self.caste_type}, male={self.male_population}, female={self.female_population})>"

    @property
    def total_population(self) -> int:
        return (self.male_population or 0) + (self.female_population or 0)


class AgeWisePopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Population per five-year age band and gender."""
    __tablename__ = "age_wise_population"

    age_group = Column(String(20), nullable=False)
    gender = Column(String(10), nullable=False)
    population = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('age_group', 'gender', name='uq_age_wise_population_group_gender'),
    )


class AgeGroupHousehead(UUIDPrimaryKeyMixin, Base):
    """
    Household heads by gender for each age group.

    The source table also carries an aggregate row labelled 'जम्मा'.
    """
    __tablename__ = "age_group_househead"

    age_group = Column(String(50), nullable=False, unique=True)
    male_heads = Column(Integer, nullable=False, default=0)
    female_heads = Column(Integer, nullable=False, default=0)
    total_families = Column(Integer, nullable=False, default=0)


class ReligionPopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "religion_population"

    religion_type = Column(String(20), nullable=False, unique=True)
    male_population = Column(Integer, nullable=False, default=0)
    female_population = Column(Integer, nullable=False, default=0)
    total_population = Column(Integer, nullable=False, default=0)
    # Informational only; summaries recompute shares from totals
    percentage = Column(Numeric(5, 2, asdecimal=False), default=0)


class FamilyMainOccupation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Population per main occupation, split into working-age bands."""
    __tablename__ = "family_main_occupation"

    occupation = Column(String(60), nullable=False, unique=True)
    age_15_19 = Column(Integer, nullable=False, default=0)
    age_20_24 = Column(Integer, nullable=False, default=0)
    age_25_29 = Column(Integer, nullable=False, default=0)
    age_30_34 = Column(Integer, nullable=False, default=0)
    age_35_39 = Column(Integer, nullable=False, default=0)
    age_40_44 = Column(Integer, nullable=False, default=0)
    age_45_49 = Column(Integer, nullable=False, default=0)
    total_population = Column(Integer, nullable=False, default=0)
    percentage = Column(Numeric(5, 2, asdecimal=False), nullable=False, default=0)


class WardWiseBirthCertificatePopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Children under five with and without a birth certificate per ward."""
    __tablename__ = "ward_wise_birth_certificate_population"

    ward_number = Column(Integer, nullable=False, unique=True, index=True)
    with_birth_certificate = Column(Integer, nullable=False, default=0)
    without_birth_certificate = Column(Integer, nullable=False, default=0)
    total_population_under_5 = Column(Integer)


class AgeGenderWiseDeceasedPopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "age_gender_wise_deceased_population"

    age_group = Column(String(30), nullable=False)
    gender = Column(String(10), nullable=False)
    deceased_population = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('age_group', 'gender', name='uq_deceased_population_group_gender'),
    )


class DisabilityByAge(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Counts of each disability type per age group."""
    __tablename__ = "disability_by_age"

    age_group = Column(String(50), nullable=False, unique=True)
    physical_disability = Column(Integer, nullable=False, default=0)
    visual_impairment = Column(Integer, nullable=False, default=0)
    hearing_impairment = Column(Integer, nullable=False, default=0)
    deaf_mute = Column(Integer, nullable=False, default=0)
    speech_hearing_combined = Column(Integer, nullable=False, default=0)
    intellectual_disability = Column(Integer, nullable=False, default=0)
    mental_psychosocial = Column(Integer, nullable=False, default=0)
    autism = Column(Integer, nullable=False, default=0)
    multiple_disabilities = Column(Integer, nullable=False, default=0)
    other_disabilities = Column(Integer, nullable=False, default=0)
    total = Column(Integer, nullable=False, default=0)


class WardGenderWiseEconomicallyActivePopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Economic activity of the 10+ population per ward and gender."""
    __tablename__ = "ward_gender_wise_economically_active_population"

    # Stored as text: the source data uses 'जम्मा' for aggregate rows
    ward_number = Column(String(10), nullable=False)
    gender = Column(String(20), nullable=False)
    age_10_plus_total = Column(Integer, nullable=False, default=0)
    economically_active_employed = Column(Integer, nullable=False, default=0)
    economically_active_unemployed = Column(Integer, nullable=False, default=0)
    household_work = Column(Integer, nullable=False, default=0)
    economically_active_total = Column(Integer, nullable=False, default=0)
    dependent_population = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('ward_number', 'gender', name='uq_economically_active_ward_gender'),
    )


class DemographicSummary(TimestampMixin, Base):
    """Single-row table of headline demographic figures."""
    __tablename__ = "demographic_summary"

    id = Column(String(36), primary_key=True, default="singleton")
    total_population = Column(Integer)
    population_male = Column(Integer)
    population_female = Column(Integer)
    sex_ratio = Column(Numeric(asdecimal=False))
    annual_growth_rate = Column(Numeric(asdecimal=False))
    literacy_rate = Column(Numeric(asdecimal=False))
    total_households = Column(Integer)
    average_household_size = Column(Numeric(asdecimal=False))
    population_density = Column(Numeric(asdecimal=False))
    data_year = Column(Text)
    data_year_english = Column(Text)


class WardDemographics(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Population and area of every ward of a municipality."""
    __tablename__ = "ward_demographics"

    municipality_id = Column(Integer, nullable=False, index=True)
    ward_no = Column(Integer, nullable=False, index=True)
    included_vdc_or_municipality = Column(Text, nullable=False)
    population = Column(Integer, nullable=False)
    area_sq_km = Column(Numeric(10, 2, asdecimal=False), nullable=False)

    __table_args__ = (
        UniqueConstraint('municipality_id', 'ward_no', name='uq_ward_demographics_municipality_ward'),
        Index('idx_ward_demographics_municipality_ward', 'municipality_id', 'ward_no'),
    )


class MotherTonguePopulation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "mother_tongue_population"

    language_type = Column(String(40), nullable=False, unique=True)
    population = Column(Integer, nullable=False, default=0)
    percentage = Column(Numeric(5, 2, asdecimal=False), default=0)


class BirthplaceHouseholds(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """
    Population by age group and place of birth.

    The row with age_group 'जम्मा' holds the municipality totals.
    """
    __tablename__ = "birthplace_households"

    age_group = Column(String(50), nullable=False, unique=True)
    total_population = Column(Integer, nullable=False, default=0)
    nepal_born = Column(Integer, nullable=False, default=0)
    born_in_district_municipality = Column(Integer, nullable=False, default=0)
    born_in_district_other = Column(Integer, nullable=False, default=0)
    born_in_district_total = Column(Integer, nullable=False, default=0)
    born_other_district = Column(Integer, nullable=False, default=0)
    born_abroad = Column(Integer, nullable=False, default=0)
    birth_place_unknown = Column(Integer, nullable=False, default=0)
