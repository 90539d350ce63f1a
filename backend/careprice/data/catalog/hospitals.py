"""Hospital snapshot for the Raleigh-Durham-Chapel Hill NC area."""

from typing import Dict, List

HOSPITALS: List[Dict] = [
    {
        "id": "duke_main",
        "name": "Duke University Hospital",
        "address": "2301 Erwin Rd",
        "city": "Durham",
        "state": "NC",
        "zip": "27710",
        "phone": "(919) 684-8111",
        "rating": 4.7,
        "dataFreshness": "2026-09-02",
        "coordinates": {"lat": 36.0074, "lng": -78.9370},
        "financialAssistance": {
            "available": True,
            "discountPercent": 100,
            "programName": "Duke Health Financial Assistance",
            "eligibilityCriteria": "Uninsured or underinsured NC residents",
            "incomeThreshold": "Up to 300% of the Federal Poverty Level",
        },
    },
    {
        "id": "duke_regional",
        "name": "Duke Regional Hospital",
        "address": "3643 N Roxboro St",
        "city": "Durham",
        "state": "NC",
        "zip": "27704",
        "phone": "(919) 470-4000",
        "rating": 4.1,
        "dataFreshness": "2026-07-15",
        "coordinates": {"lat": 36.0442, "lng": -78.8890},
        "financialAssistance": {
            "available": True,
            "discountPercent": 100,
            "programName": "Duke Health Financial Assistance",
            "eligibilityCriteria": "Uninsured or underinsured NC residents",
            "incomeThreshold": "Up to 300% of the Federal Poverty Level",
        },
    },
    {
        "id": "duke_raleigh",
        "name": "Duke Raleigh Hospital",
        "address": "3400 Wake Forest Rd",
        "city": "Raleigh",
        "state": "NC",
        "zip": "27609",
        "phone": "(919) 954-3000",
        "rating": 4.3,
        "dataFreshness": "2026-08-20",
        "coordinates": {"lat": 35.8290, "lng": -78.6230},
    },
    {
        "id": "unc_main",
        "name": "UNC Medical Center",
        "address": "101 Manning Dr",
        "city": "Chapel Hill",
        "state": "NC",
        "zip": "27514",
        "phone": "(984) 974-1000",
        "rating": 4.6,
        "dataFreshness": "2026-09-28",
        "coordinates": {"lat": 35.9042, "lng": -79.0500},
        "financialAssistance": {
            "available": True,
            "discountPercent": 75,
            "programName": "UNC Health Charity Care",
            "eligibilityCriteria": "Household income verification required",
            "incomeThreshold": "Up to 250% of the Federal Poverty Level",
        },
    },
    {
        "id": "unc_rex",
        "name": "UNC Rex Hospital",
        "address": "4420 Lake Boone Trail",
        "city": "Raleigh",
        "state": "NC",
        "zip": "27607",
        "phone": "(919) 784-3100",
        "rating": 4.4,
        "dataFreshness": "2026-05-30",
        "coordinates": {"lat": 35.8170, "lng": -78.7030},
    },
    {
        "id": "unc_hillsborough",
        "name": "UNC Hospitals Hillsborough Campus",
        "address": "429 Waterstone Dr",
        "city": "Hillsborough",
        "state": "NC",
        "zip": "27278",
        "phone": "(984) 215-5000",
        "rating": 3.9,
        "dataFreshness": "2026-02-11",
        "coordinates": {"lat": 36.0630, "lng": -79.0920},
        "financialAssistance": {
            "available": False,
        },
    },
    {
        "id": "wakemed_raleigh",
        "name": "WakeMed Raleigh Campus",
        "address": "3000 New Bern Ave",
        "city": "Raleigh",
        "state": "NC",
        "zip": "27610",
        "phone": "(919) 350-8000",
        "rating": 4.0,
        "dataFreshness": "2026-09-15",
        "coordinates": {"lat": 35.7860, "lng": -78.5870},
        "financialAssistance": {
            "available": True,
            "discountPercent": 60,
            "programName": "WakeMed Financial Assistance Program",
            "eligibilityCriteria": "Wake County residents without coverage",
            "incomeThreshold": "Up to 200% of the Federal Poverty Level",
        },
    },
    {
        "id": "wakemed_cary",
        "name": "WakeMed Cary Hospital",
        "address": "1900 Kildaire Farm Rd",
        "city": "Cary",
        "state": "NC",
        "zip": "27518",
        "phone": "(919) 350-2300",
        "rating": 4.2,
        "dataFreshness": "2026-08-01",
        "coordinates": {"lat": 35.7400, "lng": -78.7810},
    },
    {
        "id": "wakemed_north",
        "name": "WakeMed North Hospital",
        "address": "10000 Falls of Neuse Rd",
        "city": "Raleigh",
        "state": "NC",
        "zip": "27614",
        "phone": "(919) 350-1300",
        "rating": 3.8,
        "dataFreshness": "2026-04-22",
        "coordinates": {"lat": 35.9350, "lng": -78.5570},
    },
]


# Price data: hospital_id -> cpt_code -> {gross_charge, cash_price, insurance_rates}
# insurance_rates: provider -> plan type -> negotiated {min, max}
HOSPITAL_PRICES: Dict[str, Dict[str, Dict]] = {
    "duke_main": {
        "72148": {
            "gross_charge": 3600.00,
            "cash_price": 1500.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1080, "max": 1440}, "HMO": {"min": 900, "max": 1190}, "EPO": {"min": 970, "max": 1295}},
                "bcbs": {"PPO": {"min": 1035, "max": 1380}, "HMO": {"min": 865, "max": 1140}, "POS": {"min": 970, "max": 1315}},
                "uhc": {"PPO": {"min": 1125, "max": 1500}, "HMO": {"min": 935, "max": 1235}, "EPO": {"min": 1010, "max": 1350}},
                "cigna": {"PPO": {"min": 1100, "max": 1470}, "HMO": {"min": 920, "max": 1210}, "POS": {"min": 1030, "max": 1395}},
                "humana": {"PPO": {"min": 1005, "max": 1340}, "HMO": {"min": 835, "max": 1105}, "EPO": {"min": 905, "max": 1205}},
            },
        },
        "70553": {
            "gross_charge": 5400.00,
            "cash_price": 2250.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1620, "max": 2160}, "HMO": {"min": 1350, "max": 1780}, "EPO": {"min": 1460, "max": 1945}},
                "bcbs": {"PPO": {"min": 1555, "max": 2075}, "HMO": {"min": 1295, "max": 1710}, "POS": {"min": 1450, "max": 1970}},
                "uhc": {"PPO": {"min": 1685, "max": 2245}, "HMO": {"min": 1405, "max": 1855}, "EPO": {"min": 1515, "max": 2020}},
                "cigna": {"PPO": {"min": 1650, "max": 2205}, "HMO": {"min": 1375, "max": 1820}, "POS": {"min": 1540, "max": 2095}},
                "humana": {"PPO": {"min": 1505, "max": 2010}, "HMO": {"min": 1255, "max": 1655}, "EPO": {"min": 1355, "max": 1810}},
            },
        },
        "74177": {
            "gross_charge": 2850.00,
            "cash_price": 1190.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 855, "max": 1140}, "HMO": {"min": 715, "max": 940}, "EPO": {"min": 770, "max": 1025}},
                "bcbs": {"PPO": {"min": 820, "max": 1095}, "HMO": {"min": 685, "max": 905}, "POS": {"min": 765, "max": 1040}},
                "uhc": {"PPO": {"min": 890, "max": 1185}, "HMO": {"min": 740, "max": 980}, "EPO": {"min": 800, "max": 1065}},
                "cigna": {"PPO": {"min": 870, "max": 1165}, "HMO": {"min": 725, "max": 960}, "POS": {"min": 815, "max": 1105}},
                "humana": {"PPO": {"min": 795, "max": 1060}, "HMO": {"min": 665, "max": 875}, "EPO": {"min": 715, "max": 955}},
            },
        },
        "45378": {
            "gross_charge": 4200.00,
            "cash_price": 1750.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1260, "max": 1680}, "HMO": {"min": 1050, "max": 1385}, "EPO": {"min": 1135, "max": 1510}},
                "bcbs": {"PPO": {"min": 1210, "max": 1615}, "HMO": {"min": 1010, "max": 1330}, "POS": {"min": 1130, "max": 1530}},
                "uhc": {"PPO": {"min": 1310, "max": 1745}, "HMO": {"min": 1090, "max": 1440}, "EPO": {"min": 1180, "max": 1570}},
                "cigna": {"PPO": {"min": 1285, "max": 1715}, "HMO": {"min": 1070, "max": 1415}, "POS": {"min": 1200, "max": 1630}},
                "humana": {"PPO": {"min": 1170, "max": 1560}, "HMO": {"min": 975, "max": 1290}, "EPO": {"min": 1055, "max": 1405}},
            },
        },
        "43239": {
            "gross_charge": 3900.00,
            "cash_price": 1625.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1170, "max": 1560}, "HMO": {"min": 975, "max": 1285}, "EPO": {"min": 1055, "max": 1405}},
                "bcbs": {"PPO": {"min": 1125, "max": 1500}, "HMO": {"min": 935, "max": 1235}, "POS": {"min": 1050, "max": 1425}},
                "uhc": {"PPO": {"min": 1215, "max": 1620}, "HMO": {"min": 1015, "max": 1340}, "EPO": {"min": 1095, "max": 1460}},
                "cigna": {"PPO": {"min": 1195, "max": 1590}, "HMO": {"min": 995, "max": 1315}, "POS": {"min": 1115, "max": 1510}},
                "humana": {"PPO": {"min": 1090, "max": 1450}, "HMO": {"min": 905, "max": 1195}, "EPO": {"min": 980, "max": 1305}},
            },
        },
        "93000": {
            "gross_charge": 135.00,
            "cash_price": 55.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 40, "max": 55}, "HMO": {"min": 35, "max": 45}, "EPO": {"min": 35, "max": 50}},
                "bcbs": {"PPO": {"min": 40, "max": 50}, "HMO": {"min": 30, "max": 45}, "POS": {"min": 35, "max": 50}},
                "uhc": {"PPO": {"min": 40, "max": 55}, "HMO": {"min": 35, "max": 45}, "EPO": {"min": 40, "max": 50}},
                "cigna": {"PPO": {"min": 40, "max": 55}, "HMO": {"min": 35, "max": 45}, "POS": {"min": 40, "max": 50}},
                "humana": {"PPO": {"min": 40, "max": 50}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 35, "max": 45}},
            },
        },
        "80053": {
            "gross_charge": 105.00,
            "cash_price": 45.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 30, "max": 40}},
                "bcbs": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "POS": {"min": 30, "max": 40}},
                "uhc": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 30, "max": 40}},
                "cigna": {"PPO": {"min": 30, "max": 45}, "HMO": {"min": 25, "max": 35}, "POS": {"min": 30, "max": 40}},
                "humana": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
            },
        },
        "29881": {
            "gross_charge": 12600.00,
            "cash_price": 5250.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 3780, "max": 5040}, "HMO": {"min": 3150, "max": 4160}, "EPO": {"min": 3400, "max": 4535}},
                "bcbs": {"PPO": {"min": 3630, "max": 4840}, "HMO": {"min": 3025, "max": 3990}, "POS": {"min": 3385, "max": 4595}},
                "uhc": {"PPO": {"min": 3930, "max": 5240}, "HMO": {"min": 3275, "max": 4325}, "EPO": {"min": 3540, "max": 4715}},
                "cigna": {"PPO": {"min": 3855, "max": 5140}, "HMO": {"min": 3215, "max": 4240}, "POS": {"min": 3600, "max": 4885}},
                "humana": {"PPO": {"min": 3515, "max": 4685}, "HMO": {"min": 2930, "max": 3865}, "EPO": {"min": 3165, "max": 4220}},
            },
        },
        "77067": {
            "gross_charge": 540.00,
            "cash_price": 225.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 160, "max": 215}, "HMO": {"min": 135, "max": 180}, "EPO": {"min": 145, "max": 195}},
                "bcbs": {"PPO": {"min": 155, "max": 205}, "HMO": {"min": 130, "max": 170}, "POS": {"min": 145, "max": 195}},
                "uhc": {"PPO": {"min": 170, "max": 225}, "HMO": {"min": 140, "max": 185}, "EPO": {"min": 150, "max": 200}},
                "cigna": {"PPO": {"min": 165, "max": 220}, "HMO": {"min": 140, "max": 180}, "POS": {"min": 155, "max": 210}},
                "humana": {"PPO": {"min": 150, "max": 200}, "HMO": {"min": 125, "max": 165}, "EPO": {"min": 135, "max": 180}},
            },
        },
        "76700": {
            "gross_charge": 960.00,
            "cash_price": 400.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 290, "max": 385}, "HMO": {"min": 240, "max": 315}, "EPO": {"min": 260, "max": 345}},
                "bcbs": {"PPO": {"min": 275, "max": 370}, "HMO": {"min": 230, "max": 305}, "POS": {"min": 260, "max": 350}},
                "uhc": {"PPO": {"min": 300, "max": 400}, "HMO": {"min": 250, "max": 330}, "EPO": {"min": 270, "max": 360}},
                "cigna": {"PPO": {"min": 295, "max": 390}, "HMO": {"min": 245, "max": 325}, "POS": {"min": 275, "max": 370}},
                "humana": {"PPO": {"min": 270, "max": 355}, "HMO": {"min": 225, "max": 295}, "EPO": {"min": 240, "max": 320}},
            },
        },
        "66984": {
            "gross_charge": 9300.00,
            "cash_price": 3875.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 2790, "max": 3720}, "HMO": {"min": 2325, "max": 3070}, "EPO": {"min": 2510, "max": 3350}},
                "bcbs": {"PPO": {"min": 2680, "max": 3570}, "HMO": {"min": 2230, "max": 2945}, "POS": {"min": 2500, "max": 3395}},
                "uhc": {"PPO": {"min": 2900, "max": 3870}, "HMO": {"min": 2420, "max": 3190}, "EPO": {"min": 2610, "max": 3480}},
                "cigna": {"PPO": {"min": 2845, "max": 3795}, "HMO": {"min": 2370, "max": 3130}, "POS": {"min": 2655, "max": 3605}},
                "humana": {"PPO": {"min": 2595, "max": 3460}, "HMO": {"min": 2160, "max": 2855}, "EPO": {"min": 2335, "max": 3115}},
            },
        },
    },
    "duke_regional": {
        "72148": {
            "gross_charge": 3025.00,
            "cash_price": 1260.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 910, "max": 1210}, "HMO": {"min": 755, "max": 1000}, "EPO": {"min": 815, "max": 1090}},
                "bcbs": {"PPO": {"min": 870, "max": 1160}, "HMO": {"min": 725, "max": 960}, "POS": {"min": 815, "max": 1105}},
                "uhc": {"PPO": {"min": 945, "max": 1260}, "HMO": {"min": 785, "max": 1040}, "EPO": {"min": 850, "max": 1135}},
                "cigna": {"PPO": {"min": 925, "max": 1235}, "HMO": {"min": 770, "max": 1020}, "POS": {"min": 865, "max": 1170}},
            },
        },
        "70553": {
            "gross_charge": 4535.00,
            "cash_price": 1890.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1360, "max": 1815}, "HMO": {"min": 1135, "max": 1495}, "EPO": {"min": 1225, "max": 1635}},
                "bcbs": {"PPO": {"min": 1305, "max": 1740}, "HMO": {"min": 1090, "max": 1435}, "POS": {"min": 1220, "max": 1655}},
                "uhc": {"PPO": {"min": 1415, "max": 1885}, "HMO": {"min": 1180, "max": 1555}, "EPO": {"min": 1275, "max": 1700}},
                "cigna": {"PPO": {"min": 1390, "max": 1850}, "HMO": {"min": 1155, "max": 1525}, "POS": {"min": 1295, "max": 1760}},
            },
        },
        "74177": {
            "gross_charge": 2395.00,
            "cash_price": 1000.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 720, "max": 960}, "HMO": {"min": 600, "max": 790}, "EPO": {"min": 645, "max": 860}},
                "bcbs": {"PPO": {"min": 690, "max": 920}, "HMO": {"min": 575, "max": 760}, "POS": {"min": 645, "max": 875}},
                "uhc": {"PPO": {"min": 745, "max": 995}, "HMO": {"min": 625, "max": 820}, "EPO": {"min": 675, "max": 895}},
                "cigna": {"PPO": {"min": 735, "max": 975}, "HMO": {"min": 610, "max": 805}, "POS": {"min": 685, "max": 930}},
            },
        },
        "45378": {
            "gross_charge": 3530.00,
            "cash_price": 1470.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1060, "max": 1410}, "HMO": {"min": 885, "max": 1165}, "EPO": {"min": 955, "max": 1270}},
                "bcbs": {"PPO": {"min": 1015, "max": 1355}, "HMO": {"min": 845, "max": 1120}, "POS": {"min": 950, "max": 1290}},
                "uhc": {"PPO": {"min": 1100, "max": 1470}, "HMO": {"min": 920, "max": 1210}, "EPO": {"min": 990, "max": 1320}},
                "cigna": {"PPO": {"min": 1080, "max": 1440}, "HMO": {"min": 900, "max": 1190}, "POS": {"min": 1010, "max": 1370}},
            },
        },
        "71046": {
            "gross_charge": 225.00,
            "cash_price": 95.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 70, "max": 90}, "HMO": {"min": 55, "max": 75}, "EPO": {"min": 60, "max": 80}},
                "bcbs": {"PPO": {"min": 65, "max": 85}, "HMO": {"min": 55, "max": 70}, "POS": {"min": 60, "max": 80}},
                "uhc": {"PPO": {"min": 70, "max": 95}, "HMO": {"min": 60, "max": 75}, "EPO": {"min": 65, "max": 85}},
                "cigna": {"PPO": {"min": 70, "max": 90}, "HMO": {"min": 55, "max": 75}, "POS": {"min": 65, "max": 85}},
            },
        },
        "93000": {
            "gross_charge": 115.00,
            "cash_price": 45.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 30, "max": 40}},
                "bcbs": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 30, "max": 35}, "POS": {"min": 30, "max": 40}},
                "uhc": {"PPO": {"min": 35, "max": 50}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 30, "max": 45}},
                "cigna": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 30, "max": 40}, "POS": {"min": 35, "max": 45}},
            },
        },
        "80053": {
            "gross_charge": 90.00,
            "cash_price": 35.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 30}},
                "bcbs": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "POS": {"min": 25, "max": 35}},
                "uhc": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
                "cigna": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
            },
        },
    },
    "duke_raleigh": {
        "72148": {
            "gross_charge": 3310.00,
            "cash_price": 1380.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 995, "max": 1325}, "HMO": {"min": 830, "max": 1090}, "EPO": {"min": 895, "max": 1190}},
                "bcbs": {"PPO": {"min": 955, "max": 1270}, "HMO": {"min": 795, "max": 1050}, "POS": {"min": 890, "max": 1205}},
                "cigna": {"PPO": {"min": 1015, "max": 1350}, "HMO": {"min": 845, "max": 1115}, "POS": {"min": 945, "max": 1285}},
                "humana": {"PPO": {"min": 925, "max": 1230}, "HMO": {"min": 770, "max": 1015}, "EPO": {"min": 830, "max": 1110}},
            },
        },
        "70553": {
            "gross_charge": 4970.00,
            "cash_price": 2070.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1490, "max": 1990}, "HMO": {"min": 1245, "max": 1640}, "EPO": {"min": 1340, "max": 1790}},
                "bcbs": {"PPO": {"min": 1430, "max": 1910}, "HMO": {"min": 1195, "max": 1575}, "POS": {"min": 1335, "max": 1815}},
                "cigna": {"PPO": {"min": 1520, "max": 2030}, "HMO": {"min": 1265, "max": 1675}, "POS": {"min": 1420, "max": 1925}},
                "humana": {"PPO": {"min": 1385, "max": 1850}, "HMO": {"min": 1155, "max": 1525}, "EPO": {"min": 1250, "max": 1665}},
            },
        },
        "74177": {
            "gross_charge": 2620.00,
            "cash_price": 1095.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 785, "max": 1050}, "HMO": {"min": 655, "max": 865}, "EPO": {"min": 705, "max": 945}},
                "bcbs": {"PPO": {"min": 755, "max": 1005}, "HMO": {"min": 630, "max": 830}, "POS": {"min": 705, "max": 955}},
                "cigna": {"PPO": {"min": 800, "max": 1070}, "HMO": {"min": 670, "max": 880}, "POS": {"min": 750, "max": 1015}},
                "humana": {"PPO": {"min": 730, "max": 975}, "HMO": {"min": 610, "max": 805}, "EPO": {"min": 660, "max": 875}},
            },
        },
        "43239": {
            "gross_charge": 3590.00,
            "cash_price": 1495.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1075, "max": 1435}, "HMO": {"min": 900, "max": 1185}, "EPO": {"min": 970, "max": 1290}},
                "bcbs": {"PPO": {"min": 1035, "max": 1380}, "HMO": {"min": 860, "max": 1135}, "POS": {"min": 965, "max": 1310}},
                "cigna": {"PPO": {"min": 1100, "max": 1465}, "HMO": {"min": 915, "max": 1210}, "POS": {"min": 1025, "max": 1390}},
                "humana": {"PPO": {"min": 1000, "max": 1335}, "HMO": {"min": 835, "max": 1100}, "EPO": {"min": 900, "max": 1200}},
            },
        },
        "71046": {
            "gross_charge": 250.00,
            "cash_price": 105.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 75, "max": 100}, "HMO": {"min": 65, "max": 85}, "EPO": {"min": 70, "max": 90}},
                "bcbs": {"PPO": {"min": 70, "max": 95}, "HMO": {"min": 60, "max": 80}, "POS": {"min": 65, "max": 90}},
                "cigna": {"PPO": {"min": 75, "max": 100}, "HMO": {"min": 65, "max": 85}, "POS": {"min": 70, "max": 95}},
                "humana": {"PPO": {"min": 70, "max": 95}, "HMO": {"min": 60, "max": 75}, "EPO": {"min": 65, "max": 85}},
            },
        },
        "93000": {
            "gross_charge": 125.00,
            "cash_price": 50.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 40, "max": 50}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 35, "max": 45}},
                "bcbs": {"PPO": {"min": 35, "max": 50}, "HMO": {"min": 30, "max": 40}, "POS": {"min": 35, "max": 45}},
                "cigna": {"PPO": {"min": 40, "max": 50}, "HMO": {"min": 30, "max": 40}, "POS": {"min": 35, "max": 50}},
                "humana": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 30, "max": 40}},
            },
        },
        "80053": {
            "gross_charge": 95.00,
            "cash_price": 40.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
                "bcbs": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
                "cigna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
                "humana": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "EPO": {"min": 25, "max": 30}},
            },
        },
        "29881": {
            "gross_charge": 11590.00,
            "cash_price": 4830.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 3475, "max": 4635}, "HMO": {"min": 2900, "max": 3825}, "EPO": {"min": 3130, "max": 4170}},
                "bcbs": {"PPO": {"min": 3340, "max": 4450}, "HMO": {"min": 2780, "max": 3670}, "POS": {"min": 3115, "max": 4230}},
                "cigna": {"PPO": {"min": 3545, "max": 4730}, "HMO": {"min": 2955, "max": 3900}, "POS": {"min": 3310, "max": 4490}},
                "humana": {"PPO": {"min": 3235, "max": 4310}, "HMO": {"min": 2695, "max": 3555}, "EPO": {"min": 2910, "max": 3880}},
            },
        },
        "77067": {
            "gross_charge": 495.00,
            "cash_price": 205.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 150, "max": 200}, "HMO": {"min": 125, "max": 165}, "EPO": {"min": 135, "max": 180}},
                "bcbs": {"PPO": {"min": 145, "max": 190}, "HMO": {"min": 120, "max": 155}, "POS": {"min": 135, "max": 180}},
                "cigna": {"PPO": {"min": 150, "max": 200}, "HMO": {"min": 125, "max": 165}, "POS": {"min": 140, "max": 190}},
                "humana": {"PPO": {"min": 140, "max": 185}, "HMO": {"min": 115, "max": 150}, "EPO": {"min": 125, "max": 165}},
            },
        },
    },
    "unc_main": {
        "72148": {
            "gross_charge": 3455.00,
            "cash_price": 1440.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1035, "max": 1380}, "HMO": {"min": 865, "max": 1140}, "EPO": {"min": 935, "max": 1245}},
                "bcbs": {"PPO": {"min": 995, "max": 1325}, "HMO": {"min": 830, "max": 1095}, "POS": {"min": 930, "max": 1260}},
                "uhc": {"PPO": {"min": 1080, "max": 1435}, "HMO": {"min": 900, "max": 1185}, "EPO": {"min": 970, "max": 1295}},
                "cigna": {"PPO": {"min": 1055, "max": 1410}, "HMO": {"min": 880, "max": 1165}, "POS": {"min": 985, "max": 1340}},
                "humana": {"PPO": {"min": 965, "max": 1285}, "HMO": {"min": 805, "max": 1060}, "EPO": {"min": 870, "max": 1155}},
            },
        },
        "70553": {
            "gross_charge": 5185.00,
            "cash_price": 2160.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1555, "max": 2075}, "HMO": {"min": 1295, "max": 1710}, "EPO": {"min": 1400, "max": 1865}},
                "bcbs": {"PPO": {"min": 1495, "max": 1990}, "HMO": {"min": 1245, "max": 1645}, "POS": {"min": 1395, "max": 1890}},
                "uhc": {"PPO": {"min": 1620, "max": 2155}, "HMO": {"min": 1350, "max": 1780}, "EPO": {"min": 1455, "max": 1940}},
                "cigna": {"PPO": {"min": 1585, "max": 2115}, "HMO": {"min": 1320, "max": 1745}, "POS": {"min": 1480, "max": 2010}},
                "humana": {"PPO": {"min": 1445, "max": 1930}, "HMO": {"min": 1205, "max": 1590}, "EPO": {"min": 1300, "max": 1735}},
            },
        },
        "45378": {
            "gross_charge": 4030.00,
            "cash_price": 1680.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1210, "max": 1610}, "HMO": {"min": 1010, "max": 1330}, "EPO": {"min": 1090, "max": 1450}},
                "bcbs": {"PPO": {"min": 1160, "max": 1550}, "HMO": {"min": 965, "max": 1275}, "POS": {"min": 1085, "max": 1470}},
                "uhc": {"PPO": {"min": 1255, "max": 1675}, "HMO": {"min": 1050, "max": 1385}, "EPO": {"min": 1130, "max": 1510}},
                "cigna": {"PPO": {"min": 1235, "max": 1645}, "HMO": {"min": 1030, "max": 1355}, "POS": {"min": 1150, "max": 1560}},
                "humana": {"PPO": {"min": 1125, "max": 1500}, "HMO": {"min": 935, "max": 1235}, "EPO": {"min": 1010, "max": 1350}},
            },
        },
        "43239": {
            "gross_charge": 3745.00,
            "cash_price": 1560.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1125, "max": 1500}, "HMO": {"min": 935, "max": 1235}, "EPO": {"min": 1010, "max": 1350}},
                "bcbs": {"PPO": {"min": 1080, "max": 1440}, "HMO": {"min": 900, "max": 1185}, "POS": {"min": 1005, "max": 1365}},
                "uhc": {"PPO": {"min": 1170, "max": 1560}, "HMO": {"min": 975, "max": 1285}, "EPO": {"min": 1050, "max": 1400}},
                "cigna": {"PPO": {"min": 1145, "max": 1530}, "HMO": {"min": 955, "max": 1260}, "POS": {"min": 1070, "max": 1450}},
                "humana": {"PPO": {"min": 1045, "max": 1395}, "HMO": {"min": 870, "max": 1150}, "EPO": {"min": 940, "max": 1255}},
            },
        },
        "71046": {
            "gross_charge": 260.00,
            "cash_price": 110.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 80, "max": 105}, "HMO": {"min": 65, "max": 85}, "EPO": {"min": 70, "max": 95}},
                "bcbs": {"PPO": {"min": 75, "max": 100}, "HMO": {"min": 60, "max": 80}, "POS": {"min": 70, "max": 95}},
                "uhc": {"PPO": {"min": 80, "max": 110}, "HMO": {"min": 70, "max": 90}, "EPO": {"min": 75, "max": 95}},
                "cigna": {"PPO": {"min": 80, "max": 105}, "HMO": {"min": 65, "max": 90}, "POS": {"min": 75, "max": 100}},
                "humana": {"PPO": {"min": 75, "max": 95}, "HMO": {"min": 60, "max": 80}, "EPO": {"min": 65, "max": 85}},
            },
        },
        "93000": {
            "gross_charge": 130.00,
            "cash_price": 55.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 40, "max": 50}, "HMO": {"min": 35, "max": 45}, "EPO": {"min": 35, "max": 45}},
                "bcbs": {"PPO": {"min": 35, "max": 50}, "HMO": {"min": 30, "max": 40}, "POS": {"min": 35, "max": 45}},
                "uhc": {"PPO": {"min": 40, "max": 55}, "HMO": {"min": 35, "max": 45}, "EPO": {"min": 35, "max": 50}},
                "cigna": {"PPO": {"min": 40, "max": 55}, "HMO": {"min": 35, "max": 45}, "POS": {"min": 35, "max": 50}},
                "humana": {"PPO": {"min": 35, "max": 50}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 35, "max": 45}},
            },
        },
        "80053": {
            "gross_charge": 100.00,
            "cash_price": 40.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 25, "max": 35}},
                "bcbs": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
                "uhc": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 30, "max": 35}},
                "cigna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "POS": {"min": 30, "max": 40}},
                "humana": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
            },
        },
        "29881": {
            "gross_charge": 12095.00,
            "cash_price": 5040.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 3630, "max": 4840}, "HMO": {"min": 3025, "max": 3990}, "EPO": {"min": 3265, "max": 4355}},
                "bcbs": {"PPO": {"min": 3485, "max": 4645}, "HMO": {"min": 2905, "max": 3830}, "POS": {"min": 3250, "max": 4410}},
                "uhc": {"PPO": {"min": 3775, "max": 5030}, "HMO": {"min": 3145, "max": 4150}, "EPO": {"min": 3395, "max": 4530}},
                "cigna": {"PPO": {"min": 3700, "max": 4935}, "HMO": {"min": 3085, "max": 4070}, "POS": {"min": 3455, "max": 4690}},
                "humana": {"PPO": {"min": 3375, "max": 4500}, "HMO": {"min": 2810, "max": 3710}, "EPO": {"min": 3035, "max": 4050}},
            },
        },
        "76700": {
            "gross_charge": 920.00,
            "cash_price": 385.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 275, "max": 370}, "HMO": {"min": 230, "max": 305}, "EPO": {"min": 250, "max": 330}},
                "bcbs": {"PPO": {"min": 265, "max": 355}, "HMO": {"min": 220, "max": 290}, "POS": {"min": 245, "max": 335}},
                "uhc": {"PPO": {"min": 285, "max": 385}, "HMO": {"min": 240, "max": 315}, "EPO": {"min": 260, "max": 345}},
                "cigna": {"PPO": {"min": 280, "max": 375}, "HMO": {"min": 235, "max": 310}, "POS": {"min": 265, "max": 355}},
                "humana": {"PPO": {"min": 255, "max": 340}, "HMO": {"min": 215, "max": 280}, "EPO": {"min": 230, "max": 310}},
            },
        },
        "66984": {
            "gross_charge": 8930.00,
            "cash_price": 3720.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 2680, "max": 3570}, "HMO": {"min": 2235, "max": 2945}, "EPO": {"min": 2410, "max": 3215}},
                "bcbs": {"PPO": {"min": 2570, "max": 3430}, "HMO": {"min": 2145, "max": 2830}, "POS": {"min": 2400, "max": 3260}},
                "uhc": {"PPO": {"min": 2785, "max": 3715}, "HMO": {"min": 2320, "max": 3065}, "EPO": {"min": 2510, "max": 3345}},
                "cigna": {"PPO": {"min": 2735, "max": 3645}, "HMO": {"min": 2275, "max": 3005}, "POS": {"min": 2550, "max": 3460}},
                "humana": {"PPO": {"min": 2490, "max": 3320}, "HMO": {"min": 2075, "max": 2740}, "EPO": {"min": 2240, "max": 2990}},
            },
        },
    },
    "unc_rex": {
        "72148": {
            "gross_charge": 3170.00,
            "cash_price": 1320.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 915, "max": 1215}, "HMO": {"min": 760, "max": 1005}, "POS": {"min": 850, "max": 1155}},
                "uhc": {"PPO": {"min": 990, "max": 1320}, "HMO": {"min": 825, "max": 1090}, "EPO": {"min": 890, "max": 1185}},
                "cigna": {"PPO": {"min": 970, "max": 1295}, "HMO": {"min": 810, "max": 1065}, "POS": {"min": 905, "max": 1230}},
                "humana": {"PPO": {"min": 885, "max": 1180}, "HMO": {"min": 735, "max": 975}, "EPO": {"min": 795, "max": 1060}},
            },
        },
        "74177": {
            "gross_charge": 2510.00,
            "cash_price": 1045.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 725, "max": 965}, "HMO": {"min": 600, "max": 795}, "POS": {"min": 675, "max": 915}},
                "uhc": {"PPO": {"min": 785, "max": 1045}, "HMO": {"min": 655, "max": 860}, "EPO": {"min": 705, "max": 940}},
                "cigna": {"PPO": {"min": 770, "max": 1025}, "HMO": {"min": 640, "max": 845}, "POS": {"min": 715, "max": 975}},
                "humana": {"PPO": {"min": 700, "max": 935}, "HMO": {"min": 585, "max": 770}, "EPO": {"min": 630, "max": 840}},
            },
        },
        "45378": {
            "gross_charge": 3695.00,
            "cash_price": 1540.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 1065, "max": 1420}, "HMO": {"min": 885, "max": 1170}, "POS": {"min": 995, "max": 1350}},
                "uhc": {"PPO": {"min": 1155, "max": 1535}, "HMO": {"min": 960, "max": 1270}, "EPO": {"min": 1040, "max": 1385}},
                "cigna": {"PPO": {"min": 1130, "max": 1510}, "HMO": {"min": 940, "max": 1245}, "POS": {"min": 1055, "max": 1430}},
                "humana": {"PPO": {"min": 1030, "max": 1375}, "HMO": {"min": 860, "max": 1135}, "EPO": {"min": 930, "max": 1235}},
            },
        },
        "43239": {
            "gross_charge": 3430.00,
            "cash_price": 1430.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 990, "max": 1315}, "HMO": {"min": 825, "max": 1085}, "POS": {"min": 920, "max": 1250}},
                "uhc": {"PPO": {"min": 1070, "max": 1425}, "HMO": {"min": 890, "max": 1175}, "EPO": {"min": 965, "max": 1285}},
                "cigna": {"PPO": {"min": 1050, "max": 1400}, "HMO": {"min": 875, "max": 1155}, "POS": {"min": 980, "max": 1330}},
                "humana": {"PPO": {"min": 955, "max": 1275}, "HMO": {"min": 795, "max": 1055}, "EPO": {"min": 860, "max": 1150}},
            },
        },
        "71046": {
            "gross_charge": 240.00,
            "cash_price": 100.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 70, "max": 90}, "HMO": {"min": 60, "max": 75}, "POS": {"min": 65, "max": 90}},
                "uhc": {"PPO": {"min": 75, "max": 100}, "HMO": {"min": 60, "max": 80}, "EPO": {"min": 65, "max": 90}},
                "cigna": {"PPO": {"min": 75, "max": 100}, "HMO": {"min": 60, "max": 80}, "POS": {"min": 70, "max": 95}},
                "humana": {"PPO": {"min": 65, "max": 90}, "HMO": {"min": 55, "max": 75}, "EPO": {"min": 60, "max": 80}},
            },
        },
        "93000": {
            "gross_charge": 120.00,
            "cash_price": 50.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 30, "max": 40}, "POS": {"min": 30, "max": 45}},
                "uhc": {"PPO": {"min": 35, "max": 50}, "HMO": {"min": 30, "max": 40}, "EPO": {"min": 35, "max": 45}},
                "cigna": {"PPO": {"min": 35, "max": 50}, "HMO": {"min": 30, "max": 40}, "POS": {"min": 35, "max": 45}},
                "humana": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 30, "max": 35}, "EPO": {"min": 30, "max": 40}},
            },
        },
        "80053": {
            "gross_charge": 90.00,
            "cash_price": 40.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "POS": {"min": 25, "max": 35}},
                "uhc": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
                "cigna": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
                "humana": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "EPO": {"min": 25, "max": 30}},
            },
        },
        "77067": {
            "gross_charge": 475.00,
            "cash_price": 200.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 135, "max": 180}, "HMO": {"min": 115, "max": 150}, "POS": {"min": 130, "max": 175}},
                "uhc": {"PPO": {"min": 150, "max": 200}, "HMO": {"min": 125, "max": 165}, "EPO": {"min": 135, "max": 180}},
                "cigna": {"PPO": {"min": 145, "max": 195}, "HMO": {"min": 120, "max": 160}, "POS": {"min": 135, "max": 185}},
                "humana": {"PPO": {"min": 135, "max": 175}, "HMO": {"min": 110, "max": 145}, "EPO": {"min": 120, "max": 160}},
            },
        },
        "76700": {
            "gross_charge": 845.00,
            "cash_price": 350.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 245, "max": 325}, "HMO": {"min": 205, "max": 270}, "POS": {"min": 225, "max": 310}},
                "uhc": {"PPO": {"min": 265, "max": 350}, "HMO": {"min": 220, "max": 290}, "EPO": {"min": 235, "max": 315}},
                "cigna": {"PPO": {"min": 260, "max": 345}, "HMO": {"min": 215, "max": 285}, "POS": {"min": 240, "max": 330}},
                "humana": {"PPO": {"min": 235, "max": 315}, "HMO": {"min": 195, "max": 260}, "EPO": {"min": 210, "max": 285}},
            },
        },
    },
    "unc_hillsborough": {
        "70553": {
            "gross_charge": 3890.00,
            "cash_price": 1620.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1165, "max": 1555}, "HMO": {"min": 975, "max": 1285}, "EPO": {"min": 1050, "max": 1400}},
                "bcbs": {"PPO": {"min": 1120, "max": 1495}, "HMO": {"min": 935, "max": 1230}, "POS": {"min": 1045, "max": 1420}},
                "uhc": {"PPO": {"min": 1215, "max": 1620}, "HMO": {"min": 1010, "max": 1335}, "EPO": {"min": 1090, "max": 1455}},
            },
        },
        "74177": {
            "gross_charge": 2050.00,
            "cash_price": 855.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 615, "max": 820}, "HMO": {"min": 515, "max": 675}, "EPO": {"min": 555, "max": 740}},
                "bcbs": {"PPO": {"min": 590, "max": 785}, "HMO": {"min": 490, "max": 650}, "POS": {"min": 550, "max": 750}},
                "uhc": {"PPO": {"min": 640, "max": 855}, "HMO": {"min": 535, "max": 705}, "EPO": {"min": 575, "max": 770}},
            },
        },
        "45378": {
            "gross_charge": 3025.00,
            "cash_price": 1260.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 910, "max": 1210}, "HMO": {"min": 755, "max": 1000}, "EPO": {"min": 815, "max": 1090}},
                "bcbs": {"PPO": {"min": 870, "max": 1160}, "HMO": {"min": 725, "max": 960}, "POS": {"min": 815, "max": 1105}},
                "uhc": {"PPO": {"min": 945, "max": 1260}, "HMO": {"min": 785, "max": 1040}, "EPO": {"min": 850, "max": 1135}},
            },
        },
        "43239": {
            "gross_charge": 2810.00,
            "cash_price": 1170.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 845, "max": 1125}, "HMO": {"min": 705, "max": 925}, "EPO": {"min": 760, "max": 1010}},
                "bcbs": {"PPO": {"min": 810, "max": 1080}, "HMO": {"min": 675, "max": 890}, "POS": {"min": 755, "max": 1025}},
                "uhc": {"PPO": {"min": 875, "max": 1170}, "HMO": {"min": 730, "max": 965}, "EPO": {"min": 790, "max": 1050}},
            },
        },
        "71046": {
            "gross_charge": 195.00,
            "cash_price": 80.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 60, "max": 80}, "HMO": {"min": 50, "max": 65}, "EPO": {"min": 55, "max": 70}},
                "bcbs": {"PPO": {"min": 55, "max": 75}, "HMO": {"min": 45, "max": 60}, "POS": {"min": 50, "max": 70}},
                "uhc": {"PPO": {"min": 60, "max": 80}, "HMO": {"min": 50, "max": 65}, "EPO": {"min": 55, "max": 75}},
            },
        },
        "93000": {
            "gross_charge": 95.00,
            "cash_price": 40.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
                "bcbs": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
                "uhc": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 25, "max": 35}},
            },
        },
    },
    "wakemed_raleigh": {
        "72148": {
            "gross_charge": 2880.00,
            "cash_price": 1200.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 865, "max": 1150}, "HMO": {"min": 720, "max": 950}, "EPO": {"min": 780, "max": 1035}},
                "bcbs": {"PPO": {"min": 830, "max": 1105}, "HMO": {"min": 690, "max": 910}, "POS": {"min": 775, "max": 1050}},
                "uhc": {"PPO": {"min": 900, "max": 1200}, "HMO": {"min": 750, "max": 990}, "EPO": {"min": 810, "max": 1080}},
                "cigna": {"PPO": {"min": 880, "max": 1175}, "HMO": {"min": 735, "max": 970}, "POS": {"min": 825, "max": 1115}},
                "humana": {"PPO": {"min": 805, "max": 1070}, "HMO": {"min": 670, "max": 885}, "EPO": {"min": 725, "max": 965}},
            },
        },
        "70553": {
            "gross_charge": 4320.00,
            "cash_price": 1800.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1295, "max": 1730}, "HMO": {"min": 1080, "max": 1425}, "EPO": {"min": 1165, "max": 1555}},
                "bcbs": {"PPO": {"min": 1245, "max": 1660}, "HMO": {"min": 1035, "max": 1370}, "POS": {"min": 1160, "max": 1575}},
                "uhc": {"PPO": {"min": 1350, "max": 1795}, "HMO": {"min": 1125, "max": 1485}, "EPO": {"min": 1215, "max": 1615}},
                "cigna": {"PPO": {"min": 1320, "max": 1765}, "HMO": {"min": 1100, "max": 1455}, "POS": {"min": 1235, "max": 1675}},
                "humana": {"PPO": {"min": 1205, "max": 1605}, "HMO": {"min": 1005, "max": 1325}, "EPO": {"min": 1085, "max": 1445}},
            },
        },
        "74177": {
            "gross_charge": 2280.00,
            "cash_price": 950.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 685, "max": 910}, "HMO": {"min": 570, "max": 750}, "EPO": {"min": 615, "max": 820}},
                "bcbs": {"PPO": {"min": 655, "max": 875}, "HMO": {"min": 545, "max": 720}, "POS": {"min": 615, "max": 830}},
                "uhc": {"PPO": {"min": 710, "max": 950}, "HMO": {"min": 595, "max": 780}, "EPO": {"min": 640, "max": 855}},
                "cigna": {"PPO": {"min": 700, "max": 930}, "HMO": {"min": 580, "max": 765}, "POS": {"min": 650, "max": 885}},
                "humana": {"PPO": {"min": 635, "max": 850}, "HMO": {"min": 530, "max": 700}, "EPO": {"min": 575, "max": 765}},
            },
        },
        "45378": {
            "gross_charge": 3360.00,
            "cash_price": 1400.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1010, "max": 1345}, "HMO": {"min": 840, "max": 1110}, "EPO": {"min": 905, "max": 1210}},
                "bcbs": {"PPO": {"min": 970, "max": 1290}, "HMO": {"min": 805, "max": 1065}, "POS": {"min": 905, "max": 1225}},
                "uhc": {"PPO": {"min": 1050, "max": 1400}, "HMO": {"min": 875, "max": 1155}, "EPO": {"min": 945, "max": 1260}},
                "cigna": {"PPO": {"min": 1030, "max": 1370}, "HMO": {"min": 855, "max": 1130}, "POS": {"min": 960, "max": 1300}},
                "humana": {"PPO": {"min": 935, "max": 1250}, "HMO": {"min": 780, "max": 1030}, "EPO": {"min": 845, "max": 1125}},
            },
        },
        "43239": {
            "gross_charge": 3120.00,
            "cash_price": 1300.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 935, "max": 1250}, "HMO": {"min": 780, "max": 1030}, "EPO": {"min": 840, "max": 1125}},
                "bcbs": {"PPO": {"min": 900, "max": 1200}, "HMO": {"min": 750, "max": 990}, "POS": {"min": 840, "max": 1140}},
                "uhc": {"PPO": {"min": 975, "max": 1300}, "HMO": {"min": 810, "max": 1070}, "EPO": {"min": 875, "max": 1170}},
                "cigna": {"PPO": {"min": 955, "max": 1275}, "HMO": {"min": 795, "max": 1050}, "POS": {"min": 890, "max": 1210}},
                "humana": {"PPO": {"min": 870, "max": 1160}, "HMO": {"min": 725, "max": 960}, "EPO": {"min": 785, "max": 1045}},
            },
        },
        "71046": {
            "gross_charge": 215.00,
            "cash_price": 90.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 65, "max": 85}, "HMO": {"min": 55, "max": 70}, "EPO": {"min": 60, "max": 75}},
                "bcbs": {"PPO": {"min": 60, "max": 85}, "HMO": {"min": 50, "max": 70}, "POS": {"min": 60, "max": 80}},
                "uhc": {"PPO": {"min": 65, "max": 90}, "HMO": {"min": 55, "max": 75}, "EPO": {"min": 60, "max": 80}},
                "cigna": {"PPO": {"min": 65, "max": 90}, "HMO": {"min": 55, "max": 70}, "POS": {"min": 60, "max": 85}},
                "humana": {"PPO": {"min": 60, "max": 80}, "HMO": {"min": 50, "max": 65}, "EPO": {"min": 55, "max": 70}},
            },
        },
        "80053": {
            "gross_charge": 85.00,
            "cash_price": 35.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "EPO": {"min": 25, "max": 30}},
                "bcbs": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 25}, "POS": {"min": 25, "max": 30}},
                "uhc": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "EPO": {"min": 25, "max": 30}},
                "cigna": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "POS": {"min": 25, "max": 35}},
                "humana": {"PPO": {"min": 25, "max": 30}, "HMO": {"min": 20, "max": 25}, "EPO": {"min": 20, "max": 30}},
            },
        },
        "29881": {
            "gross_charge": 10080.00,
            "cash_price": 4200.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 3025, "max": 4030}, "HMO": {"min": 2520, "max": 3325}, "EPO": {"min": 2720, "max": 3630}},
                "bcbs": {"PPO": {"min": 2905, "max": 3870}, "HMO": {"min": 2420, "max": 3195}, "POS": {"min": 2710, "max": 3675}},
                "uhc": {"PPO": {"min": 3145, "max": 4195}, "HMO": {"min": 2620, "max": 3460}, "EPO": {"min": 2830, "max": 3775}},
                "cigna": {"PPO": {"min": 3085, "max": 4115}, "HMO": {"min": 2570, "max": 3395}, "POS": {"min": 2880, "max": 3905}},
                "humana": {"PPO": {"min": 2810, "max": 3750}, "HMO": {"min": 2345, "max": 3095}, "EPO": {"min": 2530, "max": 3375}},
            },
        },
        "77067": {
            "gross_charge": 430.00,
            "cash_price": 180.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 130, "max": 170}, "HMO": {"min": 110, "max": 140}, "EPO": {"min": 115, "max": 155}},
                "bcbs": {"PPO": {"min": 125, "max": 165}, "HMO": {"min": 105, "max": 135}, "POS": {"min": 115, "max": 155}},
                "uhc": {"PPO": {"min": 135, "max": 180}, "HMO": {"min": 110, "max": 150}, "EPO": {"min": 120, "max": 160}},
                "cigna": {"PPO": {"min": 130, "max": 175}, "HMO": {"min": 110, "max": 145}, "POS": {"min": 125, "max": 165}},
                "humana": {"PPO": {"min": 120, "max": 160}, "HMO": {"min": 100, "max": 130}, "EPO": {"min": 110, "max": 145}},
            },
        },
        "76700": {
            "gross_charge": 770.00,
            "cash_price": 320.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 230, "max": 310}, "HMO": {"min": 195, "max": 255}, "EPO": {"min": 210, "max": 275}},
                "bcbs": {"PPO": {"min": 220, "max": 295}, "HMO": {"min": 185, "max": 245}, "POS": {"min": 205, "max": 280}},
                "uhc": {"PPO": {"min": 240, "max": 320}, "HMO": {"min": 200, "max": 265}, "EPO": {"min": 215, "max": 290}},
                "cigna": {"PPO": {"min": 235, "max": 315}, "HMO": {"min": 195, "max": 260}, "POS": {"min": 220, "max": 300}},
                "humana": {"PPO": {"min": 215, "max": 285}, "HMO": {"min": 180, "max": 235}, "EPO": {"min": 195, "max": 260}},
            },
        },
        "66984": {
            "gross_charge": 7440.00,
            "cash_price": 3100.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 2230, "max": 2975}, "HMO": {"min": 1860, "max": 2455}, "EPO": {"min": 2010, "max": 2680}},
                "bcbs": {"PPO": {"min": 2145, "max": 2855}, "HMO": {"min": 1785, "max": 2355}, "POS": {"min": 2000, "max": 2715}},
                "uhc": {"PPO": {"min": 2320, "max": 3095}, "HMO": {"min": 1935, "max": 2555}, "EPO": {"min": 2090, "max": 2785}},
                "cigna": {"PPO": {"min": 2275, "max": 3035}, "HMO": {"min": 1895, "max": 2505}, "POS": {"min": 2125, "max": 2885}},
                "humana": {"PPO": {"min": 2075, "max": 2770}, "HMO": {"min": 1730, "max": 2285}, "EPO": {"min": 1870, "max": 2490}},
            },
        },
    },
    "wakemed_cary": {
        "72148": {
            "gross_charge": 2735.00,
            "cash_price": 1140.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 820, "max": 1095}, "HMO": {"min": 685, "max": 905}, "EPO": {"min": 740, "max": 985}},
                "bcbs": {"PPO": {"min": 790, "max": 1050}, "HMO": {"min": 655, "max": 865}, "POS": {"min": 735, "max": 1000}},
                "uhc": {"PPO": {"min": 855, "max": 1140}, "HMO": {"min": 710, "max": 940}, "EPO": {"min": 770, "max": 1025}},
                "humana": {"PPO": {"min": 765, "max": 1015}, "HMO": {"min": 635, "max": 840}, "EPO": {"min": 685, "max": 915}},
            },
        },
        "70553": {
            "gross_charge": 4105.00,
            "cash_price": 1710.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 1230, "max": 1640}, "HMO": {"min": 1025, "max": 1355}, "EPO": {"min": 1110, "max": 1480}},
                "bcbs": {"PPO": {"min": 1180, "max": 1575}, "HMO": {"min": 985, "max": 1300}, "POS": {"min": 1105, "max": 1500}},
                "uhc": {"PPO": {"min": 1280, "max": 1710}, "HMO": {"min": 1065, "max": 1410}, "EPO": {"min": 1155, "max": 1535}},
                "humana": {"PPO": {"min": 1145, "max": 1525}, "HMO": {"min": 955, "max": 1260}, "EPO": {"min": 1030, "max": 1375}},
            },
        },
        "74177": {
            "gross_charge": 2165.00,
            "cash_price": 905.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 650, "max": 865}, "HMO": {"min": 540, "max": 715}, "EPO": {"min": 585, "max": 780}},
                "bcbs": {"PPO": {"min": 625, "max": 830}, "HMO": {"min": 520, "max": 685}, "POS": {"min": 580, "max": 790}},
                "uhc": {"PPO": {"min": 675, "max": 900}, "HMO": {"min": 565, "max": 745}, "EPO": {"min": 610, "max": 810}},
                "humana": {"PPO": {"min": 605, "max": 805}, "HMO": {"min": 505, "max": 665}, "EPO": {"min": 545, "max": 725}},
            },
        },
        "45378": {
            "gross_charge": 3190.00,
            "cash_price": 1330.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 955, "max": 1275}, "HMO": {"min": 800, "max": 1055}, "EPO": {"min": 860, "max": 1150}},
                "bcbs": {"PPO": {"min": 920, "max": 1225}, "HMO": {"min": 765, "max": 1010}, "POS": {"min": 855, "max": 1165}},
                "uhc": {"PPO": {"min": 995, "max": 1325}, "HMO": {"min": 830, "max": 1095}, "EPO": {"min": 895, "max": 1195}},
                "humana": {"PPO": {"min": 890, "max": 1185}, "HMO": {"min": 740, "max": 980}, "EPO": {"min": 800, "max": 1070}},
            },
        },
        "43239": {
            "gross_charge": 2965.00,
            "cash_price": 1235.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 890, "max": 1185}, "HMO": {"min": 740, "max": 980}, "EPO": {"min": 800, "max": 1065}},
                "bcbs": {"PPO": {"min": 855, "max": 1140}, "HMO": {"min": 710, "max": 940}, "POS": {"min": 795, "max": 1080}},
                "uhc": {"PPO": {"min": 925, "max": 1235}, "HMO": {"min": 770, "max": 1020}, "EPO": {"min": 835, "max": 1110}},
                "humana": {"PPO": {"min": 825, "max": 1105}, "HMO": {"min": 690, "max": 910}, "EPO": {"min": 745, "max": 995}},
            },
        },
        "93000": {
            "gross_charge": 105.00,
            "cash_price": 45.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 30, "max": 40}},
                "bcbs": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 35}, "POS": {"min": 30, "max": 40}},
                "uhc": {"PPO": {"min": 35, "max": 45}, "HMO": {"min": 25, "max": 35}, "EPO": {"min": 30, "max": 40}},
                "humana": {"PPO": {"min": 30, "max": 40}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
            },
        },
        "80053": {
            "gross_charge": 80.00,
            "cash_price": 35.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 25, "max": 30}, "HMO": {"min": 20, "max": 25}, "EPO": {"min": 20, "max": 30}},
                "bcbs": {"PPO": {"min": 25, "max": 30}, "HMO": {"min": 20, "max": 25}, "POS": {"min": 20, "max": 30}},
                "uhc": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 25}, "EPO": {"min": 20, "max": 30}},
                "humana": {"PPO": {"min": 20, "max": 30}, "HMO": {"min": 20, "max": 25}, "EPO": {"min": 20, "max": 25}},
            },
        },
        "29881": {
            "gross_charge": 9575.00,
            "cash_price": 3990.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 2875, "max": 3830}, "HMO": {"min": 2395, "max": 3160}, "EPO": {"min": 2585, "max": 3445}},
                "bcbs": {"PPO": {"min": 2760, "max": 3675}, "HMO": {"min": 2300, "max": 3035}, "POS": {"min": 2575, "max": 3495}},
                "uhc": {"PPO": {"min": 2985, "max": 3985}, "HMO": {"min": 2490, "max": 3285}, "EPO": {"min": 2690, "max": 3585}},
                "humana": {"PPO": {"min": 2670, "max": 3560}, "HMO": {"min": 2225, "max": 2940}, "EPO": {"min": 2405, "max": 3205}},
            },
        },
        "77067": {
            "gross_charge": 410.00,
            "cash_price": 170.00,
            "insurance_rates": {
                "aetna": {"PPO": {"min": 125, "max": 165}, "HMO": {"min": 105, "max": 135}, "EPO": {"min": 110, "max": 150}},
                "bcbs": {"PPO": {"min": 120, "max": 155}, "HMO": {"min": 100, "max": 130}, "POS": {"min": 110, "max": 150}},
                "uhc": {"PPO": {"min": 130, "max": 170}, "HMO": {"min": 105, "max": 140}, "EPO": {"min": 115, "max": 155}},
                "humana": {"PPO": {"min": 115, "max": 155}, "HMO": {"min": 95, "max": 125}, "EPO": {"min": 105, "max": 135}},
            },
        },
    },
    "wakemed_north": {
        "72148": {
            "gross_charge": 2450.00,
            "cash_price": 1020.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 705, "max": 940}, "HMO": {"min": 590, "max": 775}, "POS": {"min": 660, "max": 895}},
                "uhc": {"PPO": {"min": 765, "max": 1020}, "HMO": {"min": 635, "max": 840}, "EPO": {"min": 690, "max": 915}},
                "cigna": {"PPO": {"min": 750, "max": 1000}, "HMO": {"min": 625, "max": 825}, "POS": {"min": 700, "max": 950}},
            },
        },
        "70553": {
            "gross_charge": 3670.00,
            "cash_price": 1530.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 1055, "max": 1410}, "HMO": {"min": 880, "max": 1165}, "POS": {"min": 985, "max": 1340}},
                "uhc": {"PPO": {"min": 1145, "max": 1525}, "HMO": {"min": 955, "max": 1260}, "EPO": {"min": 1030, "max": 1375}},
                "cigna": {"PPO": {"min": 1125, "max": 1495}, "HMO": {"min": 935, "max": 1235}, "POS": {"min": 1050, "max": 1420}},
            },
        },
        "74177": {
            "gross_charge": 1940.00,
            "cash_price": 810.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 560, "max": 745}, "HMO": {"min": 465, "max": 615}, "POS": {"min": 520, "max": 710}},
                "uhc": {"PPO": {"min": 605, "max": 805}, "HMO": {"min": 505, "max": 665}, "EPO": {"min": 545, "max": 725}},
                "cigna": {"PPO": {"min": 595, "max": 790}, "HMO": {"min": 495, "max": 655}, "POS": {"min": 555, "max": 750}},
            },
        },
        "45378": {
            "gross_charge": 2855.00,
            "cash_price": 1190.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 820, "max": 1095}, "HMO": {"min": 685, "max": 905}, "POS": {"min": 765, "max": 1040}},
                "uhc": {"PPO": {"min": 890, "max": 1190}, "HMO": {"min": 740, "max": 980}, "EPO": {"min": 800, "max": 1070}},
                "cigna": {"PPO": {"min": 875, "max": 1165}, "HMO": {"min": 730, "max": 960}, "POS": {"min": 815, "max": 1105}},
            },
        },
        "71046": {
            "gross_charge": 185.00,
            "cash_price": 75.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 55, "max": 70}, "HMO": {"min": 45, "max": 60}, "POS": {"min": 50, "max": 65}},
                "uhc": {"PPO": {"min": 60, "max": 75}, "HMO": {"min": 50, "max": 65}, "EPO": {"min": 50, "max": 70}},
                "cigna": {"PPO": {"min": 55, "max": 75}, "HMO": {"min": 45, "max": 60}, "POS": {"min": 55, "max": 70}},
            },
        },
        "93000": {
            "gross_charge": 90.00,
            "cash_price": 40.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 25, "max": 35}, "HMO": {"min": 20, "max": 30}, "POS": {"min": 25, "max": 35}},
                "uhc": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "EPO": {"min": 25, "max": 35}},
                "cigna": {"PPO": {"min": 30, "max": 35}, "HMO": {"min": 25, "max": 30}, "POS": {"min": 25, "max": 35}},
            },
        },
        "80053": {
            "gross_charge": 70.00,
            "cash_price": 30.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 20, "max": 25}, "HMO": {"min": 15, "max": 20}, "POS": {"min": 20, "max": 25}},
                "uhc": {"PPO": {"min": 20, "max": 30}, "HMO": {"min": 20, "max": 25}, "EPO": {"min": 20, "max": 25}},
                "cigna": {"PPO": {"min": 20, "max": 30}, "HMO": {"min": 20, "max": 25}, "POS": {"min": 20, "max": 25}},
            },
        },
        "29881": {
            "gross_charge": 8570.00,
            "cash_price": 3570.00,
            "insurance_rates": {
                "bcbs": {"PPO": {"min": 2470, "max": 3290}, "HMO": {"min": 2055, "max": 2715}, "POS": {"min": 2305, "max": 3125}},
                "uhc": {"PPO": {"min": 2675, "max": 3565}, "HMO": {"min": 2230, "max": 2940}, "EPO": {"min": 2405, "max": 3210}},
                "cigna": {"PPO": {"min": 2620, "max": 3495}, "HMO": {"min": 2185, "max": 2885}, "POS": {"min": 2450, "max": 3320}},
            },
        },
    },
}
