from models.profile import Profile
from models.coop import Coop
from models.chicken import Chicken, ChickenStatus
from models.egg_production import EggProduction, EggGrade
from models.feed import Feed
from models.health_record import HealthRecord, HealthRecordType
from models.sales import Sale, SaleStatus
from models.revoked_token import RevokedToken

__all__ = ['Chicken', 'ChickenStatus', 'Coop', 'EggGrade', 'EggProduction', 'Feed', 'HealthRecord', 'HealthRecordType', 'Profile', 'RevokedToken', 'Sale', 'SaleStatus',]
