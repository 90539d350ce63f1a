"""Procedure snapshot. Order matters: the search matcher takes the first match."""

from typing import Dict, List

PROCEDURES: List[Dict] = [
    {
        "cpt_code": "72148",
        "name": "MRI Lumbar Spine without Contrast",
        "category": "Imaging",
        "description": "Magnetic resonance imaging of the lower back, used to evaluate disc herniation, spinal stenosis and nerve compression.",
        "insights": [
            "Freestanding imaging centers often charge far less than hospital outpatient departments for the same scan.",
            "Most insurers require prior authorization for a lumbar MRI; confirm before scheduling.",
            "Ask whether the cash price includes the radiologist's reading fee.",
        ],
    },
    {
        "cpt_code": "70553",
        "name": "MRI Brain with and without Contrast",
        "category": "Imaging",
        "description": "MRI of the brain performed before and after contrast injection.",
        "insights": [
            "Contrast studies take longer and cost more; confirm your doctor needs both phases.",
            "Let the facility know about kidney problems before a contrast study.",
        ],
    },
    {
        "cpt_code": "74177",
        "name": "CT Abdomen and Pelvis with Contrast",
        "category": "Imaging",
        "description": "Computed tomography of the abdomen and pelvis with intravenous contrast.",
        "insights": [
            "Emergency department CT scans are billed at much higher rates than scheduled outpatient scans.",
        ],
    },
    {
        "cpt_code": "45378",
        "name": "Colonoscopy, Diagnostic",
        "category": "Gastroenterology",
        "description": "Endoscopic examination of the colon.",
        "insights": [
            "Screening colonoscopies are usually covered at no cost under preventive care; diagnostic ones are not.",
            "Anesthesia and pathology are often billed separately from the facility fee.",
        ],
    },
    {
        "cpt_code": "43239",
        "name": "Upper GI Endoscopy with Biopsy",
        "category": "Gastroenterology",
        "description": "Esophagogastroduodenoscopy with single or multiple biopsies.",
        "insights": [
            "Ambulatory surgery centers typically cost less than hospital endoscopy suites.",
        ],
    },
    {
        "cpt_code": "71046",
        "name": "Chest X-Ray, 2 Views",
        "category": "Imaging",
        "description": "Radiologic examination of the chest, two views.",
        "insights": [],
    },
    {
        "cpt_code": "93000",
        "name": "Electrocardiogram (ECG/EKG)",
        "category": "Cardiology",
        "description": "Routine electrocardiogram with at least 12 leads, with interpretation and report.",
        "insights": [
            "An ECG done during an office visit is often cheaper than one done in a hospital outpatient setting.",
        ],
    },
    {
        "cpt_code": "80053",
        "name": "Comprehensive Metabolic Panel",
        "category": "Laboratory",
        "description": "Blood test measuring glucose, electrolytes, kidney and liver function.",
        "insights": [
            "Independent labs frequently offer cash prices well below hospital lab rates.",
        ],
    },
    {
        "cpt_code": "29881",
        "name": "Knee Arthroscopy with Meniscectomy",
        "category": "Orthopedics",
        "description": "Arthroscopic knee surgery with medial or lateral meniscectomy.",
        "insights": [
            "Surgeon, anesthesia and facility fees are usually billed separately; ask for a bundled quote.",
            "Many hospitals offer bundled cash pricing for outpatient orthopedic procedures.",
        ],
    },
    {
        "cpt_code": "77067",
        "name": "Screening Mammography, Bilateral",
        "category": "Imaging",
        "description": "Bilateral screening mammogram including computer-aided detection.",
        "insights": [
            "Annual screening mammograms are covered as preventive care by most plans.",
        ],
    },
    {
        "cpt_code": "76700",
        "name": "Ultrasound, Abdomen Complete",
        "category": "Imaging",
        "description": "Real-time abdominal ultrasound with image documentation.",
        "insights": [],
    },
    {
        "cpt_code": "66984",
        "name": "Cataract Surgery with Intraocular Lens",
        "category": "Ophthalmology",
        "description": "Extracapsular cataract removal with insertion of intraocular lens prosthesis.",
        "insights": [
            "Premium lenses are not covered by most insurance plans and add to the out-of-pocket cost.",
        ],
    },
]
