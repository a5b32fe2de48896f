"""Static Turkish administrative locations served by Odanet."""

from functools import lru_cache

from domain.entities import City, District
from domain.services.location_catalog import LocationCatalog

ISTANBUL_NEIGHBORHOODS = {
    "Kadıköy": ["Caferağa", "Fenerbahçe", "Göztepe", "Koşuyolu", "Moda", "Suadiye"],
    "Beşiktaş": ["Arnavutköy", "Bebek", "Etiler", "Levent", "Ortaköy"],
    "Şişli": ["Bomonti", "Fulya", "Mecidiyeköy", "Nişantaşı"],
    "Üsküdar": ["Altunizade", "Çengelköy", "Kuzguncuk"],
}

TURKEY_LOCATIONS = [
    ("İstanbul", [
        "Adalar", "Arnavutköy", "Ataşehir", "Avcılar", "Bağcılar",
        "Bahçelievler", "Bakırköy", "Başakşehir", "Bayrampaşa", "Beşiktaş",
        "Beykoz", "Beylikdüzü", "Beyoğlu", "Büyükçekmece", "Çatalca",
        "Çekmeköy", "Esenler", "Esenyurt", "Eyüpsultan", "Fatih",
        "Gaziosmanpaşa", "Güngören", "Kadıköy", "Kağıthane", "Kartal",
        "Küçükçekmece", "Maltepe", "Pendik", "Sancaktepe", "Sarıyer",
        "Silivri", "Sultanbeyli", "Sultangazi", "Şile", "Şişli",
        "Tuzla", "Ümraniye", "Üsküdar", "Zeytinburnu",
    ]),
    ("Ankara", [
        "Altındağ", "Çankaya", "Keçiören", "Mamak", "Sincan",
        "Yenimahalle", "Etimesgut", "Gölbaşı", "Pursaklar",
    ]),
    ("İzmir", [
        "Konak", "Karşıyaka", "Bornova", "Buca", "Çiğli",
        "Gaziemir", "Balçova", "Bayraklı", "Narlıdere",
    ]),
    ("Antalya", [
        "Muratpaşa", "Kepez", "Konyaaltı", "Aksu", "Döşemealtı",
        "Alanya", "Manavgat", "Serik",
    ]),
    ("Bursa", ["Osmangazi", "Nilüfer", "Yıldırım", "Mudanya", "Gemlik"]),
    ("Adana", ["Seyhan", "Çukurova", "Sarıçam", "Yüreğir"]),
    ("Gaziantep", []),
    ("Konya", []),
    ("Mersin", []),
    ("Diyarbakır", []),
    ("Kayseri", []),
    ("Eskişehir", []),
    ("Samsun", []),
    ("Denizli", []),
    ("Şanlıurfa", []),
]


def build_turkey_catalog() -> LocationCatalog:
    """Build the catalog, deriving every slug from its display name."""
    cities = []
    for city_name, district_names in TURKEY_LOCATIONS:
        neighborhoods = ISTANBUL_NEIGHBORHOODS if city_name == "İstanbul" else {}
        districts = [
            District.from_names(name, neighborhoods.get(name, ()))
            for name in district_names
        ]
        cities.append(City.from_names(city_name, districts))
    return LocationCatalog(cities)


@lru_cache()
def get_turkey_catalog() -> LocationCatalog:
    """
    Get the process-wide catalog.

    Returns:
        Singleton LocationCatalog
    """
    return build_turkey_catalog()
