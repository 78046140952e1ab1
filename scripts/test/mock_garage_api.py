"""
Stand-in garage layout provider for local runs.
Serves GET /garage with sectors A, B, C (15 spots each) on a small GPS grid.
Usage: uvicorn scripts.test.mock_garage_api:app --port 3000
   or: python scripts/test/mock_garage_api.py
"""

from fastapi import FastAPI

BASE_LAT = -23.561684
BASE_LNG = -46.655981

SECTORS = [
    {"name": "A", "base_price": 10.00, "max_capacity": 15},
    {"name": "B", "base_price": 12.00, "max_capacity": 15},
    {"name": "C", "base_price": 15.00, "max_capacity": 15},
]

app = FastAPI(title="Garage Layout Simulator", version="1.0.0")


def build_spots(sectors):
    spots = []
    for sector in sectors:
        sector_offset = (ord(sector["name"][0]) - ord("A")) * 0.001
        for i in range(1, sector["max_capacity"] + 1):
            spots.append({
                "spot_id": f"{sector['name']}{i:03d}",
                "sector": sector["name"],
                "lat": round(BASE_LAT + sector_offset + (i % 15) * 0.0001, 6),
                "lng": round(BASE_LNG + sector_offset + (i // 15) * 0.0001, 6),
            })
    return spots


@app.get("/garage", summary="Full garage layout: sectors and spots")
def get_garage():
    return {"sectors": SECTORS, "spots": build_spots(SECTORS)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3000)
