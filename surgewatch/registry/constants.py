"""
Registry Constants
Default base and theater catalogs.
"""

# Known bases (approximate coordinates)
DEFAULT_BASES = [
    # Middle East / Persian Gulf
    {"id": "al_udeid", "name": "Al Udeid Air Base", "lat": 25.117, "lon": 51.315},
    {"id": "ali_al_salem_air_base", "name": "Ali Al Salem Air Base", "lat": 29.347, "lon": 47.521},
    {"id": "camp_arifjan", "name": "Camp Arifjan", "lat": 28.883, "lon": 48.150},
    {"id": "camp_buehring", "name": "Camp Buehring", "lat": 29.700, "lon": 47.417},
    {"id": "kuwait_naval_base", "name": "Kuwait Naval Base", "lat": 28.860, "lon": 48.280},
    {"id": "naval_support_activity_bahrain", "name": "NSA Bahrain", "lat": 26.210, "lon": 50.610},
    {"id": "isa_air_base", "name": "Isa Air Base", "lat": 25.918, "lon": 50.591},
    {"id": "masirah_aira_base", "name": "Masirah Air Base", "lat": 20.675, "lon": 58.890},
    {"id": "rafo_thumrait", "name": "RAFO Thumrait", "lat": 17.666, "lon": 54.025},
    {"id": "al_dhafra_air_base", "name": "Al Dhafra Air Base", "lat": 24.248, "lon": 54.547},
    {"id": "port_of_jebel_ali", "name": "Port of Jebel Ali", "lat": 25.010, "lon": 55.060},
    {"id": "fujairah_naval_base", "name": "Fujairah Naval Base", "lat": 25.120, "lon": 56.350},
    {"id": "prince_sultan_air_base", "name": "Prince Sultan Air Base", "lat": 24.062, "lon": 47.580},
    {"id": "ain_assad_air_base", "name": "Ain al-Asad Air Base", "lat": 33.785, "lon": 42.441},
    {"id": "camp_victory", "name": "Camp Victory", "lat": 33.290, "lon": 44.240},
    {"id": "naval_support_facility_diego_garcia", "name": "NSF Diego Garcia", "lat": -7.313, "lon": 72.411},
    # Eastern Europe
    {"id": "camp_bondsteel", "name": "Camp Bondsteel", "lat": 42.360, "lon": 21.250},
    {"id": "aitos_logistics_center", "name": "Aitos Logistics Center", "lat": 42.700, "lon": 27.250},
    {"id": "bezmer", "name": "Bezmer Air Base", "lat": 42.455, "lon": 26.352},
    {"id": "graf_ignatievo", "name": "Graf Ignatievo Air Base", "lat": 42.290, "lon": 24.714},
    # Western Europe
    {"id": "ramstein", "name": "Ramstein Air Base", "lat": 49.437, "lon": 7.600},
    {"id": "spangdahlem", "name": "Spangdahlem Air Base", "lat": 49.973, "lon": 6.692},
    {"id": "usag_stuttgart", "name": "USAG Stuttgart", "lat": 48.720, "lon": 9.080},
    {"id": "raf_lakenheath", "name": "RAF Lakenheath", "lat": 52.409, "lon": 0.561},
    {"id": "raf_mildenhall", "name": "RAF Mildenhall", "lat": 52.362, "lon": 0.486},
    {"id": "aviano", "name": "Aviano Air Base", "lat": 46.032, "lon": 12.596},
    # Western Pacific
    {"id": "kadena_air_base", "name": "Kadena Air Base", "lat": 26.356, "lon": 127.768},
    {"id": "camp_fuji", "name": "Camp Fuji", "lat": 35.320, "lon": 138.860},
    {"id": "fleet_activities_okinawa", "name": "Fleet Activities Okinawa", "lat": 26.300, "lon": 127.910},
    {"id": "yokota", "name": "Yokota Air Base", "lat": 35.748, "lon": 139.348},
    {"id": "misawsa", "name": "Misawa Air Base", "lat": 40.703, "lon": 141.368},
    {"id": "osan_air_base", "name": "Osan Air Base", "lat": 37.090, "lon": 127.030},
    {"id": "kunsan_ab", "name": "Kunsan Air Base", "lat": 35.904, "lon": 126.616},
    {"id": "us_army_garrison_humphreys", "name": "USAG Humphreys", "lat": 36.963, "lon": 127.031},
    {"id": "andersen_air_force_base", "name": "Andersen AFB", "lat": 13.584, "lon": 144.930},
    # Horn of Africa
    {"id": "camp_lemonnier", "name": "Camp Lemonnier", "lat": 11.547, "lon": 43.155},
    {"id": "contingency_location_garoua", "name": "Contingency Location Garoua", "lat": 9.336, "lon": 13.370},
    {"id": "niger_air_base_201", "name": "Niger Air Base 201", "lat": 16.960, "lon": 8.010},
    # Outside any theater
    {"id": "incirlik", "name": "Incirlik Air Base", "lat": 37.002, "lon": 35.426},
    {"id": "rota", "name": "Naval Station Rota", "lat": 36.645, "lon": -6.349},
    {"id": "souda_bay", "name": "NSA Souda Bay", "lat": 35.530, "lon": 24.150},
    {"id": "sigonella", "name": "NAS Sigonella", "lat": 37.402, "lon": 14.922},
    {"id": "thule", "name": "Pituffik Space Base", "lat": 76.531, "lon": -68.703},
]

DEFAULT_THEATERS = [
    {
        "id": "middle-east",
        "name": "Middle East / Persian Gulf",
        "base_ids": [
            "al_udeid", "ali_al_salem_air_base", "camp_arifjan", "camp_buehring",
            "kuwait_naval_base", "naval_support_activity_bahrain", "isa_air_base",
            "masirah_aira_base", "rafo_thumrait", "al_dhafra_air_base",
            "port_of_jebel_ali", "fujairah_naval_base", "prince_sultan_air_base",
            "ain_assad_air_base", "camp_victory", "naval_support_facility_diego_garcia",
        ],
        "center_lat": 27.0,
        "center_lon": 50.0,
    },
    {
        "id": "europe-east",
        "name": "Eastern Europe",
        "base_ids": ["camp_bondsteel", "aitos_logistics_center", "bezmer", "graf_ignatievo"],
        "center_lat": 45.0,
        "center_lon": 25.0,
    },
    {
        "id": "europe-west",
        "name": "Western Europe",
        "base_ids": [
            "ramstein", "spangdahlem", "usag_stuttgart",
            "raf_lakenheath", "raf_mildenhall", "aviano",
        ],
        "center_lat": 50.0,
        "center_lon": 8.0,
    },
    {
        "id": "pacific-west",
        "name": "Western Pacific",
        "base_ids": [
            "kadena_air_base", "camp_fuji", "fleet_activities_okinawa", "yokota",
            "misawsa", "osan_air_base", "kunsan_ab", "us_army_garrison_humphreys",
            "andersen_air_force_base",
        ],
        "center_lat": 30.0,
        "center_lon": 130.0,
    },
    {
        "id": "africa-horn",
        "name": "Horn of Africa",
        "base_ids": ["camp_lemonnier", "contingency_location_garoua", "niger_air_base_201"],
        "center_lat": 10.0,
        "center_lon": 40.0,
    },
]
