from fastapi.testclient import TestClient
from minesentry.main import app

client = TestClient(app)

print('ROOT:')
print(client.get('/').json())

print('\nHEALTH:')
print(client.get('/health').json())

print('\nSTORAGE HEALTH:')
try:
    resp = client.get('/health/storage')
    print(resp.status_code)
    try:
        print(resp.json())
    except Exception:
        print(resp.text)
except Exception as e:
    print('Storage call raised exception:', e)

print('\nHOTSPOTS:')
print([h['name'] for h in client.get('/api/hotspots').json()])
