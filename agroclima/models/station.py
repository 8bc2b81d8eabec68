"""
Station Model
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Static descriptor of the monitoring station"""
    id: str
    name: str
    lat: float
    lng: float
    is_active: bool = True
    
    @classmethod
    def from_config(cls, config):
        return cls(
            id=config['STATION_ID'],
            name=config['STATION_NAME'],
            lat=config['STATION_LAT'],
            lng=config['STATION_LNG'],
            is_active=config.get('STATION_ACTIVE', True),
        )
    
    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'location': {'lat': self.lat, 'lng': self.lng},
            'isActive': self.is_active,
        }
    
    def __repr__(self):
        return f'<Station {self.name}>'
