"""
Reading Classification Services

Threshold ladders and trend helpers that turn a numeric reading into a
display category.
"""

from bisect import bisect_right


TEMPERATURE_THRESHOLDS = (15, 25, 32)
TEMPERATURE_BUCKETS = ('cold', 'mild', 'warm', 'hot')

HUMIDITY_THRESHOLDS = (30, 50, 70)
HUMIDITY_BUCKETS = ('dry', 'low', 'ideal', 'saturated')

UV_THRESHOLDS = (3, 6, 8)
UV_BUCKETS = ('low', 'moderate', 'high', 'extreme')

PRECIPITATION_THRESHOLDS = (20, 50)
PRECIPITATION_BUCKETS = ('low', 'medium', 'high')

BUCKET_COLORS = {
    'temperature': {'cold': 'cielo', 'mild': 'verde', 'warm': 'dorado', 'hot': 'tierra'},
    'humidity': {'dry': 'tierra', 'low': 'dorado', 'ideal': 'verde', 'saturated': 'cielo'},
    # moderate and high share a colour
    'uv': {'low': 'verde', 'moderate': 'dorado', 'high': 'dorado', 'extreme': 'tierra'},
    'precipitation': {'low': 'green', 'medium': 'yellow', 'high': 'blue'},
}

SEVERITY_RANKS = {'low': 1, 'medium': 2, 'high': 3}
SEVERITY_LABELS = {'low': 'INFORMATION', 'medium': 'WARNING', 'high': 'CRITICAL'}


def bucketize(value, thresholds, labels):
    """Return the label of the first threshold strictly above `value`.
    
    Thresholds are ascending and each is the inclusive lower bound of the
    next bucket, so `labels` holds one more entry than `thresholds`.
    """
    if len(labels) != len(thresholds) + 1:
        raise ValueError('labels must have exactly one more entry than thresholds')
    return labels[bisect_right(thresholds, value)]


def trend_of(current, previous=None):
    """Compare a reading with its predecessor: 'up', 'down' or 'flat'."""
    if previous is None:
        return 'flat'
    if current > previous:
        return 'up'
    if current < previous:
        return 'down'
    return 'flat'


def temperature_bucket(temp_celsius):
    return bucketize(temp_celsius, TEMPERATURE_THRESHOLDS, TEMPERATURE_BUCKETS)


def humidity_bucket(humidity):
    return bucketize(humidity, HUMIDITY_THRESHOLDS, HUMIDITY_BUCKETS)


def uv_bucket(uv_index):
    return bucketize(uv_index, UV_THRESHOLDS, UV_BUCKETS)


def precipitation_bucket(chance):
    """Bucket a forecast rain probability (0-100 %)."""
    return bucketize(chance, PRECIPITATION_THRESHOLDS, PRECIPITATION_BUCKETS)


def severity_rank(severity):
    """Ordinal of an alert severity, used for sorting and tallies."""
    try:
        return SEVERITY_RANKS[severity]
    except KeyError:
        raise ValueError(f'Unknown severity: {severity}') from None


def severity_label(severity):
    severity_rank(severity)
    return SEVERITY_LABELS[severity]


# (tile key, reading field, unit, bucket function, palette name or fixed colour)
KPI_TILES = (
    ('temperature', 'temperature', '°C', temperature_bucket, 'temperature'),
    ('humidity', 'humidity', '%', humidity_bucket, 'humidity'),
    ('pressure', 'pressure', 'hPa', None, 'cielo'),
    ('uvIndex', 'uv_index', 'UV', uv_bucket, 'uv'),
    ('windSpeed', 'wind_speed', 'km/h', None, 'verde'),
    ('precipitation', 'precipitation', 'mm', None, 'cielo'),
    ('lightLevel', 'light_level', 'lux', None, 'dorado'),
)


def classify_reading(current, previous=None):
    """Build the KPI tile attributes for `current` against `previous`."""
    tiles = {}
    for key, field, unit, bucket_fn, palette in KPI_TILES:
        value = getattr(current, field)
        prev_value = getattr(previous, field) if previous is not None else None
        tile = {
            'value': value,
            'unit': unit,
            'trend': trend_of(value, prev_value),
            'bucket': None,
            'color': palette,
        }
        if bucket_fn is not None:
            bucket = bucket_fn(value)
            tile['bucket'] = bucket
            tile['color'] = BUCKET_COLORS[palette][bucket]
        if key == 'windSpeed':
            tile['direction'] = current.wind_direction
        tiles[key] = tile
    return tiles
