# ============================================================================
# src/clinical_validation/constants/medical_terms.py
# ============================================================================
"""
Medical vocabularies used to pull keywords out of dictation and to bucket
them for targeted code lookups. Terms are lowercase.
"""

ANATOMY_TERMS = (
    # Head and neck
    'head', 'neck', 'skull', 'brain', 'cerebral', 'cranial', 'facial', 'sinus', 'nasal', 'orbit',
    'eye', 'ocular', 'ear', 'temporal', 'jaw', 'mandible', 'maxilla', 'throat', 'pharynx', 'larynx',
    'thyroid', 'cervical',

    # Upper extremities
    'shoulder', 'arm', 'elbow', 'forearm', 'wrist', 'hand', 'finger', 'thumb', 'humerus', 'radius',
    'ulna', 'carpal', 'metacarpal', 'phalanges',

    # Torso
    'chest', 'thorax', 'thoracic', 'rib', 'sternum', 'clavicle', 'scapula', 'abdomen', 'abdominal',
    'pelvis', 'pelvic', 'hip', 'spine', 'vertebra', 'vertebral', 'lumbar', 'sacral', 'coccyx',

    # Lower extremities
    'leg', 'thigh', 'knee', 'patella', 'tibia', 'fibula', 'ankle', 'foot', 'toe', 'heel', 'femur',
    'tarsal', 'metatarsal',

    # Internal organs
    'liver', 'hepatic', 'kidney', 'renal', 'spleen', 'splenic', 'pancreas', 'pancreatic',
    'gallbladder', 'biliary', 'bladder', 'urinary', 'uterus', 'uterine', 'ovary', 'ovarian',
    'prostate', 'prostatic', 'testis', 'testicular', 'lung', 'pulmonary', 'heart', 'cardiac',
    'aorta', 'aortic', 'artery', 'arterial', 'vein', 'venous', 'intestine', 'intestinal',
    'colon', 'colonic', 'rectum', 'rectal', 'stomach', 'gastric', 'esophagus', 'esophageal',
)

MODALITY_TERMS = (
    # X-ray
    'x-ray', 'xray', 'radiograph', 'radiography', 'plain film',

    # CT
    'ct', 'cat scan', 'computed tomography', 'ct scan', 'ct angiogram', 'cta',

    # MRI
    'mri', 'magnetic resonance', 'mr', 'fmri', 'mr angiogram', 'mra', 'mrcp',

    # Ultrasound
    'ultrasound', 'sonogram', 'sonography', 'doppler', 'echocardiogram', 'echo',

    # Nuclear medicine
    'pet', 'pet scan', 'pet-ct', 'nuclear', 'nuclear medicine', 'spect', 'bone scan',

    # Angiography
    'angiogram', 'angiography', 'venogram', 'venography', 'arteriogram',

    # Other imaging
    'mammogram', 'mammography', 'dexa', 'bone density', 'fluoroscopy', 'myelogram',
    'discogram', 'arthrogram',
)

SYMPTOM_TERMS = (
    # Pain and discomfort
    'pain', 'ache', 'headache', 'migraine', 'discomfort', 'tenderness', 'burning', 'sharp',
    'dull', 'chronic', 'acute', 'numbness', 'tingling', 'weakness', 'dizziness', 'vertigo',
    'syncope', 'nausea', 'vomiting', 'fever', 'cough', 'dyspnea', 'shortness of breath',

    # Inflammation and swelling
    'swelling', 'inflammation', 'edema', 'effusion', 'enlarged', 'hypertrophy',

    # Trauma
    'fracture', 'break', 'sprain', 'strain', 'tear', 'rupture', 'dislocation', 'subluxation',
    'trauma', 'injury', 'wound', 'laceration', 'fall',

    # Growths and masses
    'mass', 'tumor', 'cancer', 'malignancy', 'neoplasm', 'lesion', 'nodule', 'cyst', 'polyp',

    # Infection
    'infection', 'abscess', 'cellulitis', 'osteomyelitis', 'septic',

    # Vascular
    'bleeding', 'hemorrhage', 'clot', 'thrombus', 'embolism', 'ischemia', 'infarct',
    'stenosis', 'blockage', 'obstruction', 'occlusion', 'aneurysm', 'dissection',

    # Stones and calcifications
    'stone', 'calculus', 'calcification', 'lithiasis',

    # Degenerative
    'arthritis', 'osteoarthritis', 'degeneration', 'degenerative', 'herniation', 'herniated',
    'bulging', 'protrusion', 'spondylosis', 'spondylolisthesis', 'radiculopathy',

    # Other conditions
    'pneumonia', 'bronchitis', 'copd', 'asthma', 'fibrosis', 'emphysema',
    'stroke', 'tia', 'seizure', 'epilepsy', 'dementia', 'alzheimer',
    'diabetes', 'hypertension', 'hyperlipidemia', 'atherosclerosis',
    'gastritis', 'gerd', 'ulcer', 'colitis', 'diverticulitis', 'appendicitis',
    'nephritis', 'pyelonephritis', 'renal failure', 'urolithiasis',
    'hepatitis', 'cirrhosis', 'cholecystitis', 'pancreatitis',
)

ABBREVIATION_TERMS = (
    'ca', 'dx', 'fx', 'hx', 'px', 'rx', 'sx', 'tx',
    'ap', 'pa', 'lat', 'bilat', 'w/', 'w/o', 's/p',
    'r/o', 'c/o', 'h/o', 'p/o',
)
