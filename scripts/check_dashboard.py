import sys
sys.path.insert(0, '.')
from agroclima import create_app
from agroclima.config import TestConfig

app = create_app(TestConfig)

with app.test_client() as client:
    r = client.get('/api/overview')
    print('overview status', r.status_code)
    data = r.get_json()
    print('station:', data['station']['name'])
    for key, tile in data['kpis'].items():
        print(f"  {key:<14} {tile['value']:>8} {tile['unit']:<5} {tile['trend']:<5} {tile['color']}")
    print('active alerts:', data['alerts']['counts'])
    print('summary:', data['summary'])

    r = client.post('/api/refresh')
    print('refresh status', r.status_code, r.get_json()['current']['id'])
    r = client.get('/api/history')
    print('window size', r.get_json()['count'], '/', r.get_json()['capacity'])
