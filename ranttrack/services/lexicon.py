"""Built-in symptom vocabulary.

SYMPTOM_LEMMAS holds single-token keys only; anything containing a space lives
in SYMPTOM_PHRASES. Dict literals keep insertion order, and phrase iteration
goes through ``phrases_longest_first`` so ties resolve the same way on
every run.
"""
from functools import lru_cache
from typing import Dict, List, Mapping, Tuple

# ---------- Single-token lemmas ----------
SYMPTOM_LEMMAS: Dict[str, str] = {
    # energy & fatigue
    "exhaust": "fatigue", "exhausted": "fatigue", "exhaustion": "fatigue",
    "tire": "fatigue", "tired": "fatigue", "tiredness": "fatigue",
    "wipe": "fatigue", "wiped": "fatigue", "fatigue": "fatigue", "fatigued": "fatigue",
    "drain": "fatigue", "drained": "fatigue", "spent": "fatigue", "depleted": "fatigue",
    "knackered": "fatigue", "shattered": "fatigue", "zonked": "fatigue", "pooped": "fatigue",
    "bushed": "fatigue", "beat": "fatigue", "wrecked": "fatigue", "destroyed": "fatigue",
    "sluggish": "fatigue", "lethargic": "fatigue", "lethargy": "fatigue", "listless": "fatigue",
    "weary": "fatigue", "weariness": "fatigue", "enervated": "fatigue", "suffering": "fatigue",
    "zombified": "fatigue", "zombie": "fatigue", "toast": "fatigue", "cooked": "fatigue",
    "rooted": "fatigue", "buggered": "fatigue", "gassed": "fatigue", "tuckered": "fatigue",
    "rundown": "fatigue", "haggard": "fatigue",
    # crashes & flares
    "crash": "pem", "crashed": "pem", "payback": "pem", "pem": "pem",
    "overdid": "pem", "overexerted": "pem", "overexertion": "pem", "pushed": "pem", "boom": "pem",
    "flare": "flare", "flaring": "flare", "flareup": "flare", "relapse": "flare", "relapsing": "flare",
    "crashing": "pem_crash",
    "bedbound": "severe_pem", "bed-bound": "severe_pem", "bedridden": "severe_pem",
    "housebound": "severe_pem", "house-bound": "severe_pem",
    "boom-bust": "boom_bust_cycle", "boom/bust": "boom_bust_cycle",
    "push-crash": "push_crash_cycle", "push/crash": "push_crash_cycle",
    "pacing": "pacing", "energyenvelope": "energy_envelope",
    "recovery": "delayed_recovery",
    # cognitive
    "foggy": "brain_fog", "fog": "brain_fog", "fuzzy": "brain_fog", "cloudy": "brain_fog",
    "scattered": "brain_fog", "spacey": "brain_fog", "spacy": "brain_fog", "hazy": "brain_fog",
    "muddled": "brain_fog", "muddy": "brain_fog", "confused": "brain_fog", "confusion": "brain_fog",
    "disoriented": "brain_fog", "fried": "brain_fog", "loopy": "brain_fog", "braindead": "brain_fog",
    "blanking": "brain_fog", "drippy": "brain_fog", "dicey": "brain_fog",
    "forgetful": "memory", "forgetfulness": "memory", "forgetting": "memory",
    "distracted": "focus", "unfocused": "focus", "concentration": "focus",
    "concentrate": "focus", "focusing": "focus",
    # pain
    "ache": "pain", "achy": "pain", "aching": "pain", "hurt": "pain", "hurts": "pain",
    "hurting": "pain", "pain": "pain", "painful": "pain", "sore": "pain", "soreness": "pain",
    "tender": "pain", "tenderness": "pain", "throbbing": "pain", "throb": "pain",
    "stabbing": "pain", "sharp": "pain", "burning": "pain", "stinging": "pain", "cutting": "pain",
    "discomfort": "pain", "agony": "pain", "agonizing": "pain", "excruciating": "pain",
    "searing": "pain", "radiating": "pain", "gnawing": "pain", "pulsating": "pain",
    "pulsing": "pain", "shooting": "pain",
    "migraine": "headache", "migraines": "headache", "headache": "headache",
    "headaches": "headache", "cephalalgia": "headache", "head": "headache",
    "muscle": "muscle_pain", "muscles": "muscle_pain", "myalgia": "muscle_pain", "myalgias": "muscle_pain",
    "joint": "joint_pain", "joints": "joint_pain", "arthralgia": "joint_pain", "arthralgias": "joint_pain",
    "stiff": "stiffness", "stiffness": "stiffness",
    "swollen": "swelling", "swelling": "swelling",
    "back": "back_pain", "neck": "neck_pain", "chest": "chest_pain",
    "allodynia": "allodynia", "hyperalgesia": "hyperalgesia",
    "fibromyalgia": "fibromyalgia", "fibro": "fibromyalgia",
    # joints & mobility
    "subluxation": "subluxation", "subluxed": "subluxation", "subluxing": "subluxation",
    "dislocated": "dislocation", "dislocation": "dislocation", "dislocating": "dislocation",
    "hypermobile": "hypermobility", "hypermobility": "hypermobility",
    "loosey": "hypermobility", "bendy": "hypermobility",
    "unstable": "joint_instability", "instability": "joint_instability",
    # sleep
    "insomnia": "insomnia", "sleepless": "insomnia", "insomniac": "insomnia",
    "restless": "sleep_disturbance", "wired": "sleep_disturbance",
    "unrefreshed": "unrefreshing_sleep", "unrefreshing": "unrefreshing_sleep",
    "oversleep": "hypersomnia", "oversleeping": "hypersomnia", "overslept": "hypersomnia",
    "hypersomnia": "hypersomnia", "somnolent": "hypersomnia", "drowsy": "hypersomnia",
    "drowsiness": "hypersomnia",
    "nightmare": "nightmares", "nightmares": "nightmares",
    # cardiovascular & autonomic
    "palpitation": "palpitations", "palpitations": "palpitations", "palpitating": "palpitations",
    "race": "palpitations", "racing": "palpitations", "flutter": "palpitations",
    "fluttering": "palpitations", "tachy": "palpitations", "tachycardia": "palpitations",
    "skipping": "palpitations",
    "bradycardia": "bradycardia", "arrhythmia": "arrhythmia",
    "pots": "orthostatic", "orthostatic": "orthostatic", "dysautonomia": "dysautonomia",
    "presyncope": "presyncope", "presyncopal": "presyncope", "pooling": "blood_pooling",
    "dizzy": "dizziness", "dizziness": "dizziness", "lightheaded": "dizziness",
    "lightheadedness": "dizziness", "woozy": "dizziness", "unsteady": "dizziness",
    "wobbly": "dizziness", "giddy": "dizziness", "swimmy": "dizziness", "floaty": "dizziness",
    "faint": "fainting", "fainted": "fainting", "fainting": "fainting", "syncope": "fainting",
    "vertigo": "vertigo", "spinning": "vertigo",
    # gastrointestinal
    "nausea": "nausea", "nauseous": "nausea", "nauseated": "nausea", "queasy": "nausea",
    "queasiness": "nausea", "gaggy": "nausea", "gagging": "nausea", "heaving": "nausea",
    "retching": "nausea", "bilious": "nausea",
    "puke": "vomiting", "puked": "vomiting", "puking": "vomiting", "vomit": "vomiting",
    "vomited": "vomiting", "vomiting": "vomiting", "threw": "vomiting",
    "bloat": "bloating", "bloated": "bloating", "bloating": "bloating", "gassy": "bloating",
    "constipated": "constipation", "constipation": "constipation",
    "diarrhea": "diarrhea", "diarrhoea": "diarrhea", "ibs": "ibs",
    "reflux": "reflux", "heartburn": "reflux", "gerd": "reflux", "gastroparesis": "gastroparesis",
    # neurological
    "tingle": "numbness_tingling", "tingling": "numbness_tingling", "tingles": "numbness_tingling",
    "tingly": "numbness_tingling", "numb": "numbness_tingling", "numbness": "numbness_tingling",
    "paresthesia": "numbness_tingling", "paresthesias": "numbness_tingling",
    "tremor": "tremor", "tremors": "tremor", "shake": "tremor", "shaking": "tremor",
    "shaky": "tremor", "shakiness": "tremor", "tremble": "tremor", "trembling": "tremor",
    "vibrating": "tremor", "jittery": "tremor", "jitters": "tremor",
    "twitching": "twitching", "twitches": "twitching", "twitch": "twitching",
    "spasm": "spasm", "spasms": "spasm", "spasming": "spasm",
    # respiratory
    "breathless": "shortness_of_breath", "breathe": "shortness_of_breath",
    "breathing": "shortness_of_breath", "dyspnea": "shortness_of_breath",
    "breathlessness": "air_hunger", "airhunger": "air_hunger",
    "wheezy": "wheezing", "wheeze": "wheezing", "wheezing": "wheezing",
    "cough": "cough", "coughing": "cough",
    # mood
    "depressed": "low_mood", "depression": "low_mood", "sad": "low_mood", "sadness": "low_mood",
    "hopeless": "low_mood", "hopelessness": "low_mood", "crying": "low_mood", "tearful": "low_mood",
    "weepy": "low_mood", "blue": "low_mood", "despair": "low_mood",
    "anxious": "anxiety", "anxiety": "anxiety", "worried": "anxiety", "worry": "anxiety",
    "worrying": "anxiety", "nervous": "anxiety", "scared": "anxiety", "terrified": "anxiety",
    "fear": "anxiety",
    "panic": "panic", "panicky": "panic", "panicking": "panic",
    "stressed": "stress", "stress": "stress",
    "overwhelmed": "overwhelmed", "overwhelming": "overwhelmed",
    "irritable": "irritability", "irritability": "irritability", "irritated": "irritability",
    "frustrated": "irritability", "frustrating": "irritability", "cranky": "irritability",
    "grumpy": "irritability", "annoyed": "irritability", "snappy": "irritability",
    "frustration": "frustration", "moody": "mood_swings",
    "empty": "emptiness", "emptiness": "emptiness", "hollow": "emptiness", "void": "emptiness",
    "worthless": "worthlessness", "worthlessness": "worthlessness", "helpless": "helplessness",
    "despairing": "despair", "devastated": "devastation",
    "grief": "grief", "grieving": "grief", "mourning": "grief", "bereaved": "grief",
    "loneliness": "loneliness", "lonely": "loneliness",
    "rage": "rage", "enraged": "rage", "furious": "rage", "fury": "rage", "livid": "rage",
    "seething": "rage", "angry": "anger", "anger": "anger", "mad": "anger",
    "resentment": "resentment", "resentful": "resentment",
    "bitter": "bitterness", "bitterness": "bitterness", "hostile": "hostility", "hostility": "hostility",
    "shame": "shame", "ashamed": "shame", "shameful": "shame",
    "guilt": "guilt", "guilty": "guilt", "regret": "regret", "regretful": "regret",
    "humiliated": "humiliation", "humiliation": "humiliation",
    "embarrassed": "embarrassment", "embarrassment": "embarrassment",
    # dissociation
    "dissociate": "dissociation", "dissociated": "dissociation", "dissociating": "dissociation",
    "autopilot": "dissociation", "zoned": "dissociation",
    "unreality": "derealization", "unreal": "derealization", "dreamlike": "derealization",
    "robotic": "depersonalization",
    # temperature
    "sweating": "sweating", "sweaty": "sweating", "sweats": "sweating",
    "chills": "chills", "chilly": "chills", "feverish": "fever", "fever": "fever",
    "overheating": "heat_intolerance", "overheated": "heat_intolerance",
    "freezing": "cold_intolerance", "flushing": "flushing", "flushed": "flushing",
    # weakness & general malaise
    "weak": "weakness", "weakness": "weakness", "feeble": "weakness", "limp": "weakness",
    "malaise": "malaise", "unwell": "malaise", "sick": "malaise", "lousy": "malaise",
    "rough": "malaise", "awful": "malaise", "terrible": "malaise", "horrible": "malaise",
    "miserable": "malaise", "dreadful": "malaise", "rotten": "malaise", "crummy": "malaise",
    "crappy": "malaise", "rubbish": "malaise",
    "dodgy": "malaise", "peaky": "malaise", "grotty": "malaise", "naff": "malaise",
    "ropy": "malaise", "poorly": "malaise", "crook": "malaise", "crocked": "malaise",
    "wonky": "dizziness",
    # sensory
    "photophobia": "light_sensitivity", "photosensitive": "light_sensitivity",
    "photosensitivity": "light_sensitivity",
    "phonophobia": "sound_sensitivity", "hyperacusis": "sound_sensitivity",
    "distortion": "sensory_distortion",
    "parosmia": "parosmia", "dysgeusia": "dysgeusia", "anosmia": "anosmia", "ageusia": "ageusia",
    # appetite & weight
    "appetite": "appetite_change", "hungry": "appetite_change", "starving": "appetite_change",
    "anorexia": "appetite_loss", "weight": "weight_change",
    "metabolic": "metabolic", "metabolism": "metabolic",
    "undereating": "undereating", "overeating": "overeating",
    # skin
    "rash": "rash", "rashes": "rash", "malar": "rash", "butterfly": "rash",
    "hives": "hives", "itchy": "itching", "itching": "itching", "itch": "itching",
    "bruise": "bruising", "bruised": "bruising", "bruising": "bruising",
    "raynauds": "raynauds", "raynaud": "raynauds", "lump": "lump", "lumps": "lump",
    "hairloss": "hair_loss", "alopecia": "hair_loss", "shedding": "hair_loss",
    "petechiae": "petechiae", "healing": "slow_healing",
    # eyes, mouth, swelling
    "blurry": "vision_changes", "blurred": "vision_changes", "blurriness": "vision_changes",
    "floaters": "vision_changes", "aura": "aura", "auras": "aura",
    "puffy": "swelling", "puffiness": "swelling", "edema": "swelling", "oedema": "swelling",
    "inflamed": "inflammation", "inflammation": "inflammation",
    "drymouth": "dry_mouth", "ulcer": "mouth_ulcers", "ulcers": "mouth_ulcers",
    "sorethroat": "sore_throat", "bleeding": "bleeding", "bleed": "bleeding",
    # hormonal
    "menstrual": "menstruation", "menstruation": "menstruation", "pms": "pms", "pmdd": "pmdd",
    "cycle": "menstrual_cycle", "spotting": "spotting", "hormonal": "hormonal",
    "hormone": "hormonal", "estrogen": "hormonal", "progesterone": "hormonal",
    "ovulation": "ovulation",
    # trauma, ocd, adhd
    "ptsd": "ptsd", "flashback": "flashback", "flashbacks": "flashback",
    "triggered": "ptsd_trigger", "triggering": "ptsd_trigger",
    "hypervigilant": "hypervigilance", "hypervigilance": "hypervigilance",
    "startle": "startle_response", "startled": "startle_response",
    "ocd": "ocd", "obsessive": "obsessive_thoughts", "obsessing": "obsessive_thoughts",
    "compulsive": "compulsions", "compulsion": "compulsions", "compulsions": "compulsions",
    "ritualistic": "compulsions", "checking": "checking_compulsions",
    "repeating": "repetitive_behaviors",
    "adhd": "adhd", "hyperfocus": "hyperfocus", "hyperfocused": "hyperfocus",
    "hyperfixation": "hyperfixation", "understimulated": "understimulation",
    "overstimulated": "overstimulation", "executive": "executive_dysfunction",
    "paralysis": "task_paralysis",
    # bipolar, autism, bpd
    "bipolar": "bipolar", "manic": "mania", "mania": "mania",
    "hypomanic": "hypomania", "hypomania": "hypomania", "elevated": "elevated_mood",
    "grandiose": "grandiosity", "grandiosity": "grandiosity",
    "autistic": "autistic_traits", "autism": "autistic_traits", "stimming": "stimming",
    "meltdown": "autistic_meltdown", "shutdown": "autistic_shutdown",
    "masking": "masking", "scripting": "scripting",
    "bpd": "bpd", "splitting": "splitting", "abandonment": "abandonment_fears",
    # eating & substances
    "eating": "eating_disorder", "binge": "binge_eating", "binged": "binge_eating",
    "bingeing": "binge_eating", "purge": "purging", "purged": "purging", "purging": "purging",
    "restrict": "food_restriction", "restricting": "food_restriction",
    "restricted": "food_restriction",
    "substance": "substance_use", "cravings": "cravings", "craving": "cravings",
    "withdrawal": "withdrawal",
    # urinary & immune
    "urinary": "urinary", "urgency": "urinary_urgency", "frequency": "urinary_frequency",
    "cystitis": "cystitis", "infection": "infection", "infections": "infections",
    "glands": "swollen_glands",
    "reactivation": "viral_reactivation", "reactivations": "viral_reactivation",
    "reactivating": "viral_reactivation", "ebv": "ebv_reactivation",
    "epstein-barr": "ebv_reactivation", "hhv6": "viral_reactivation",
    "hhv-6": "viral_reactivation", "cmv": "viral_reactivation",
    "cytomegalovirus": "viral_reactivation", "herpesreactivation": "viral_reactivation",
    # thought patterns & behaviour
    "ruminating": "rumination", "rumination": "rumination",
    "overthinking": "overthinking", "overthink": "overthinking", "looping": "thought_loops",
    "perseverating": "perseveration", "perseveration": "perseveration",
    "perfection": "perfectionism", "perfectionism": "perfectionism",
    "perfectionist": "perfectionism", "indecisive": "indecisiveness",
    "indecisiveness": "indecisiveness",
    "withdrawn": "social_withdrawal", "withdrawing": "social_withdrawal",
    "isolating": "social_isolation", "avoiding": "avoidance", "avoidance": "avoidance",
    "cancel": "canceling_plans", "canceled": "canceling_plans", "canceling": "canceling_plans",
    "flaking": "canceling_plans", "hiding": "hiding", "unmotivated": "lack_of_motivation",
    "procrastinating": "procrastination", "procrastination": "procrastination",
    "clenching": "jaw_clenching", "grinding": "teeth_grinding", "bruxism": "teeth_grinding",
    # long covid & me/cfs
    "longhauler": "long_covid", "longcovid": "long_covid", "postcovid": "long_covid",
    "persistentcovid": "long_covid", "covid-19": "long_covid",
    "postviral": "post_viral", "post-viral": "post_viral", "postinfection": "post_viral",
    "aftercovid": "post_viral",
    "cfs": "me_cfs", "myalgic": "me_cfs", "encephalomyelitis": "me_cfs",
    "unpredictable": "unpredictable_course",
    # common misspellings
    "naseua": "nausea", "nauseas": "nausea", "dizy": "dizziness", "dizzyness": "dizziness",
    "fatige": "fatigue", "exaustion": "fatigue", "mussle": "muscle_pain",
    "heachache": "headache", "migren": "headache", "migrane": "headache",
}

# ---------- Multi-word phrases ----------
SYMPTOM_PHRASES: Dict[str, str] = {
    # fatigue
    "brain fog": "brain_fog", "bone tired": "fatigue", "bone-tired": "fatigue",
    "wiped out": "fatigue", "worn out": "fatigue", "burnt out": "burnout", "burned out": "burnout",
    "feel like death": "fatigue", "like death": "fatigue", "no energy": "fatigue",
    "low energy": "fatigue", "zero energy": "fatigue", "energy tank empty": "fatigue",
    "running on empty": "fatigue", "running on fumes": "fatigue", "hit a wall": "fatigue",
    "hitting the wall": "fatigue", "chugging along": "fatigue",
    "hit by a truck": "extreme_fatigue", "feel like a truck": "extreme_fatigue",
    "pushing my limits": "fatigue",
    # spoons
    "out of spoons": "spoon_theory", "no spoons": "spoon_theory", "low spoons": "spoon_theory",
    "spent all my spoons": "spoon_theory", "used up spoons": "spoon_theory",
    "negative spoons": "spoon_theory", "borrowing spoons": "spoon_theory",
    "spoon deficit": "spoon_theory", "spoon count": "spoon_theory", "low spoon day": "spoon_theory",
    "no spoon day": "spoon_theory", "low on spoons": "spoon_theory", "no spoons left": "spoon_theory",
    "spoon management": "pacing", "managing spoons": "pacing",
    "energy envelope": "energy_envelope",
    # pem & flares
    "post exertional": "pem", "post-exertional": "pem", "post exertional malaise": "pem",
    "post-exertional malaise": "pem", "energy crash": "pem", "crashed hard": "pem",
    "totally crashed": "pem", "complete crash": "pem", "major crash": "pem",
    "boom and bust": "pem", "boom bust": "pem", "pushed through": "pem",
    "pushed too hard": "pem", "overdid it": "pem", "paying for it": "pem",
    "paying the price": "pem",
    "severe crash": "pem_crash", "crash cycle": "pem_crash", "crash pattern": "pem_crash",
    "total crash": "pem_crash", "unable to function": "severe_pem",
    "push crash": "push_crash_cycle",
    "in a flare": "flare", "flare up": "flare", "flare-up": "flare", "flaring up": "flare",
    "having a flare": "flare", "major flare": "flare", "full flare": "flare", "bad flare": "flare",
    "good days bad days": "symptom_fluctuation", "ups and downs": "symptom_fluctuation",
    "high and low days": "symptom_fluctuation", "variable symptoms": "symptom_fluctuation",
    "good day bad day": "good_bad_day_cycle",
    "exercise intolerance": "exercise_intolerance", "cant exercise": "exercise_intolerance",
    "can't exercise": "exercise_intolerance",
    "activity intolerance": "activity_intolerance", "cant do activities": "activity_intolerance",
    "delayed recovery": "delayed_recovery", "slow recovery": "delayed_recovery",
    "not recovering": "delayed_recovery",
    "pacing failure": "pacing_failure", "failed pacing": "pacing_failure",
    "did too much": "overexertion",
    # cognitive
    "can't think": "brain_fog", "cant think": "brain_fog", "can't concentrate": "brain_fog",
    "cant concentrate": "brain_fog", "can't focus": "brain_fog", "cant focus": "brain_fog",
    "can't remember": "memory", "cant remember": "memory",
    "word finding": "cognitive_dysfunction", "word-finding": "cognitive_dysfunction",
    "can't find words": "cognitive_dysfunction", "losing words": "cognitive_dysfunction",
    "lost my words": "cognitive_dysfunction", "processing speed": "cognitive_dysfunction",
    "finding words": "cognitive_dysfunction",
    "words not working": "brain_fog", "brain not working": "brain_fog",
    "brain isn't working": "brain_fog", "brain is mush": "brain_fog", "brain is soup": "brain_fog",
    "brain soup": "brain_fog", "head full of cotton": "brain_fog", "cotton wool head": "brain_fog",
    "cotton wool": "brain_fog", "words swimming": "brain_fog",
    "thoughts are slow": "brain_fog", "slow thinking": "brain_fog",
    "thinking through mud": "brain_fog", "mental fog": "brain_fog",
    "cognitive dysfunction": "brain_fog", "fibro fog": "brain_fog", "pain fog": "brain_fog",
    "med fog": "brain_fog", "medication fog": "brain_fog",
    "brain is broken": "brain_fog", "brain is fried": "brain_fog", "brain not braining": "brain_fog",
    "can't brain": "brain_fog", "no thoughts": "brain_fog", "zero thoughts": "brain_fog",
    "brain empty": "brain_fog", "head empty": "brain_fog", "smooth brain": "brain_fog",
    "thoughts are broken": "brain_fog", "brain is complete soup": "brain_fog",
    "complete soup": "brain_fog",
    # cardiovascular & autonomic
    "heart racing": "palpitations", "heart pounding": "palpitations",
    "heart fluttering": "palpitations", "heart is racing": "palpitations",
    "heart is pounding": "palpitations", "heart skipping": "palpitations",
    "heart skipped": "palpitations", "heart rate spiked": "palpitations",
    "hr spiked": "palpitations", "heart rate high": "palpitations",
    "resting heart rate high": "palpitations",
    "heart rate spiking": "tachycardia", "heart rate is spiking": "tachycardia",
    "heart rate upon standing": "orthostatic", "hr on standing": "orthostatic",
    "standing heart rate": "orthostatic", "can't stand": "orthostatic", "cant stand": "orthostatic",
    "standing up": "orthostatic", "upon standing": "orthostatic", "when i stand": "orthostatic",
    "trouble standing": "orthostatic", "hard to stand": "orthostatic",
    "stood up too fast": "orthostatic", "getting up": "orthostatic",
    "orthostatic intolerance": "orthostatic", "positional changes": "orthostatic",
    "changing position": "orthostatic",
    "blood pooling": "blood_pooling",
    "head spinning": "vertigo", "room spinning": "vertigo",
    "almost fainted": "presyncope", "nearly fainted": "presyncope", "felt faint": "presyncope",
    "feeling faint": "presyncope", "about to pass out": "presyncope",
    "greyed out": "pre_syncope", "grayed out": "pre_syncope", "tunnel vision": "pre_syncope",
    "pre-syncope": "pre_syncope", "pre syncope": "pre_syncope",
    "vision going black": "pre_syncope", "vision tunneling": "pre_syncope",
    "blacked out": "syncope", "passed out": "syncope", "lost consciousness": "syncope",
    "got so dizzy": "dizziness", "so dizzy": "dizziness", "really dizzy": "dizziness",
    "super dizzy": "dizziness", "unsteady on feet": "dizziness",
    "blood pressure low": "low_blood_pressure", "low blood pressure": "low_blood_pressure",
    "bp low": "low_blood_pressure", "blood pressure high": "high_blood_pressure",
    "high blood pressure": "high_blood_pressure", "bp high": "high_blood_pressure",
    "adrenaline surge": "adrenaline_surge", "adrenaline rush": "adrenaline_surge",
    "adrenaline dump": "adrenaline_surge",
    # neurological
    "pins and needles": "paresthesia", "pins needles": "paresthesia",
    "static feeling": "paresthesia", "static electricity": "paresthesia",
    "electric feeling": "paresthesia", "buzzing sensation": "paresthesia",
    "tingling sensation": "paresthesia", "numbness and tingling": "paresthesia",
    "electric shock": "numbness_tingling", "electric shocks": "numbness_tingling",
    "zaps": "numbness_tingling", "brain zaps": "numbness_tingling", "head zaps": "brain_zaps",
    "internal tremor": "tremor", "internal tremors": "tremor", "internal vibrations": "tremor",
    "inner trembling": "tremor", "body vibrating": "tremor",
    "neuropathic pain": "nerve_pain",
    # pain
    "killing me": "pain", "full body pain": "pain", "all over pain": "pain",
    "widespread pain": "pain", "chronic pain": "pain", "deep and painful": "pain",
    "hurts like hell": "pain", "hurts like a bitch": "pain", "hurts so bad": "pain",
    "pain is insane": "pain", "pain is crazy": "pain", "pain is wild": "pain",
    "pain is brutal": "pain", "body feels like garbage": "pain", "body feels like shit": "pain",
    "everything hurts": "pain",
    "splitting headache": "headache", "tension headache": "headache",
    "pressure headache": "headache", "head pounding": "headache",
    "head is killing me": "headache", "head pressure": "headache",
    "head feels like garbage": "headache", "head feels like shit": "headache",
    "back pain": "back_pain", "back ache": "back_pain", "back hurts": "back_pain",
    "neck pain": "neck_pain", "neck ache": "neck_pain", "neck hurts": "neck_pain",
    "chest pain": "chest_pain", "chest ache": "chest_pain", "chest hurts": "chest_pain",
    "muscle pain": "muscle_pain", "muscle aches": "muscle_pain", "muscles ache": "muscle_pain",
    "body aches": "muscle_pain", "body is aching": "muscle_pain",
    "joint pain": "joint_pain", "joints hurt": "joint_pain", "joints ache": "joint_pain",
    "joint stiffness": "stiffness", "morning stiffness": "stiffness",
    "joints popping": "joint_instability", "joints cracking": "joint_instability",
    "joints grinding": "joint_instability",
    "joints slipping": "subluxation", "joint slipped": "subluxation",
    "partial dislocation": "subluxation", "popped out": "subluxation",
    "coat hanger pain": "coat_hanger_pain",
    "skin hurts": "allodynia", "skin pain": "allodynia", "touch hurts": "allodynia",
    "painful to touch": "allodynia",
    "skin burning": "skin_pain", "skin on fire": "skin_pain",
    # respiratory
    "short of breath": "shortness_of_breath", "shortness of breath": "shortness_of_breath",
    "hard to breathe": "shortness_of_breath", "can't breathe": "shortness_of_breath",
    "cant breathe": "shortness_of_breath", "can't catch my breath": "shortness_of_breath",
    "out of breath": "shortness_of_breath",
    "lowkey can't breathe": "shortness_of_breath", "highkey can't breathe": "shortness_of_breath",
    "air hunger": "air_hunger", "cannot catch breath": "air_hunger",
    "can't catch breath": "air_hunger", "hunger for air": "air_hunger",
    "chest tight": "chest_tightness", "chest is tight": "chest_tightness",
    "tight chest": "chest_tightness", "heavy chest": "chest_tightness",
    "chest pressure": "chest_tightness",
    "asthma attack": "asthma_attack", "bad cold": "respiratory_infection",
    "sinus infection": "respiratory_infection",
    # sleep
    "can't sleep": "insomnia", "cant sleep": "insomnia", "couldn't sleep": "insomnia",
    "couldnt sleep": "insomnia", "trouble sleeping": "insomnia", "hard to sleep": "insomnia",
    "woke up tired": "unrefreshing_sleep", "woke up exhausted": "unrefreshing_sleep",
    "still tired": "unrefreshing_sleep", "never feel rested": "unrefreshing_sleep",
    "don't feel rested": "unrefreshing_sleep",
    "sleeping all day": "hypersomnia", "slept all day": "hypersomnia",
    "sleep too much": "hypersomnia", "can't stay awake": "hypersomnia",
    "waking up constantly": "sleep_disturbance", "keep waking up": "sleep_disturbance",
    "restless sleep": "sleep_disturbance", "tossing and turning": "sleep_disturbance",
    # sensory
    "light hurts": "light_sensitivity", "lights hurt": "light_sensitivity",
    "sensitive to light": "light_sensitivity", "light sensitivity": "light_sensitivity",
    "too bright": "light_sensitivity",
    "light is too bright": "sensitivity_light", "hiding in the dark": "sensitivity_light",
    "cant handle light": "sensitivity_light", "can't handle light": "sensitivity_light",
    "bright lights": "sensitivity_light",
    "sound hurts": "sound_sensitivity", "sounds hurt": "sound_sensitivity",
    "sensitive to sound": "sound_sensitivity", "sound sensitivity": "sound_sensitivity",
    "too loud": "sound_sensitivity", "noise sensitivity": "sound_sensitivity",
    "smell sensitivity": "smell_sensitivity", "sensitive to smells": "smell_sensitivity",
    "sensory overload": "sensory_overload", "overwhelmed by stimuli": "sensory_overload",
    "too much stimulation": "sensory_overload",
    "sound distortion": "sound_distortion", "sounds distorted": "sound_distortion",
    "visual snow": "visual_snow", "seeing static": "visual_snow",
    "light flashes": "visual_disturbances", "seeing flashes": "visual_disturbances",
    "blurry vision": "vision_changes", "vision blurry": "vision_changes",
    "double vision": "vision_changes", "seeing spots": "vision_changes",
    "visual disturbance": "vision_changes", "visual disturbances": "vision_changes",
    "ringing in ears": "tinnitus", "ears ringing": "tinnitus",
    "hearing changes": "hearing_changes",
    # smell & taste
    "lost smell": "anosmia", "no smell": "anosmia", "can't smell": "anosmia",
    "loss of smell": "anosmia",
    "lost taste": "dysgeusia", "no taste": "dysgeusia", "can't taste": "dysgeusia",
    "taste weird": "dysgeusia", "distorted taste": "dysgeusia", "altered taste": "dysgeusia",
    "taste distortion": "dysgeusia", "metallic taste": "dysgeusia", "phantom taste": "dysgeusia",
    "things taste off": "dysgeusia", "loss of taste": "ageusia",
    "smell weird": "parosmia", "distorted smell": "parosmia", "altered smell": "parosmia",
    "smell distortion": "parosmia", "phantom smell": "parosmia", "things smell off": "parosmia",
    # infection & immune
    "flu-like": "flu_like", "flu like": "flu_like", "like the flu": "flu_like",
    "have the flu": "flu_like", "feels like flu": "flu_like",
    "coming down with something": "flu_like",
    "swollen glands": "swollen_lymph_nodes", "lymph nodes swollen": "swollen_lymph_nodes",
    "swollen lymph nodes": "swollen_lymph_nodes", "tender lymph nodes": "swollen_lymph_nodes",
    "keep getting sick": "frequent_infections", "always sick": "frequent_infections",
    "frequent infections": "frequent_infections",
    "herpes reactivation": "viral_reactivation",
    "histamine reaction": "mcas", "mast cell": "mcas", "mcas": "mcas",
    "mast cell activation": "mcas", "allergic reaction": "allergic_reaction",
    "hives from allergies": "hives",
    "alcohol intolerance": "alcohol_intolerance", "cant drink": "alcohol_intolerance",
    "can't drink": "alcohol_intolerance", "cant tolerate alcohol": "alcohol_intolerance",
    # long covid & me/cfs
    "long hauler": "long_covid", "long covid": "long_covid", "post covid": "long_covid",
    "covid symptoms": "long_covid",
    "post viral": "post_viral", "post infection": "post_viral",
    "myalgic encephalomyelitis": "me_cfs", "chronic fatigue syndrome": "me_cfs",
    # appetite & gi
    "can't eat": "appetite_loss", "cant eat": "appetite_loss", "no appetite": "appetite_loss",
    "not hungry": "appetite_loss", "lost appetite": "appetite_loss",
    "food aversion": "appetite_loss",
    "can't keep food down": "nausea", "stomach upset": "nausea", "stomach churning": "nausea",
    "stomach pain": "gi_pain", "abdominal pain": "gi_pain", "belly pain": "gi_pain",
    "tummy pain": "gi_pain", "stomach cramps": "gi_cramping",
    "threw up": "vomiting", "throw up": "vomiting", "throwing up": "vomiting",
    "puked": "vomiting", "puking": "vomiting", "vomited": "vomiting", "vomiting": "vomiting",
    "trouble swallowing": "dysphagia", "hard to swallow": "dysphagia",
    "difficulty swallowing": "dysphagia",
    "food intolerance": "food_intolerance", "food intolerances": "food_intolerance",
    "food sensitivities": "food_intolerance",
    "stomach distension": "bloating", "abdominal distension": "bloating",
    "gut issues": "digestive", "digestive issues": "digestive",
    "gastroparesis": "gastroparesis", "delayed emptying": "gastroparesis",
    "nothing moving": "gastroparesis",
    "early satiety": "early_satiety", "feel full quickly": "early_satiety",
    "full after few bites": "early_satiety", "feel full": "early_satiety",
    "weight gain": "weight_gain", "gaining weight": "weight_gain",
    "weight loss": "weight_loss", "losing weight": "weight_loss",
    "unexplained weight": "weight_change", "metabolic changes": "metabolic",
    # mood
    "feeling low": "low_mood", "really low": "low_mood", "feeling down": "low_mood",
    "down in the dumps": "low_mood",
    "panic attack": "panic", "anxiety attack": "panic",
    "lowkey panicking": "panic", "highkey panicking": "panic",
    "mental breakdown": "overwhelmed", "cant even": "overwhelmed", "can't even": "overwhelmed",
    "cannot even": "overwhelmed",
    "emotional rollercoaster": "mood_swings",
    "mental health": "mental_health", "taking a toll on my mental health": "mental_health",
    "intrusive thoughts": "intrusive_thoughts", "unwanted thoughts": "intrusive_thoughts",
    "racing thoughts": "racing_thoughts", "thoughts racing": "racing_thoughts",
    "emotional dysregulation": "emotional_dysregulation",
    "cant regulate emotions": "emotional_dysregulation",
    "can't regulate emotions": "emotional_dysregulation",
    "rejection sensitive": "rejection_sensitivity", "rejection sensitivity": "rejection_sensitivity",
    "suicidal thoughts": "suicidal_ideation", "thinking about death": "suicidal_ideation",
    "feeling detached": "dissociation", "floating outside": "dissociation",
    "out of body": "depersonalization", "floating outside my body": "depersonalization",
    "out of my body": "depersonalization", "outside my body": "depersonalization",
    "dont feel real": "derealization", "don't feel real": "derealization",
    "nothing feels real": "derealization",
    # temperature
    "night sweats": "night_sweats", "hot and cold": "temperature_dysregulation",
    "hot or cold": "temperature_dysregulation",
    "can't regulate temperature": "temperature_dysregulation",
    "heat intolerance": "heat_intolerance", "can't handle heat": "heat_intolerance",
    "cold intolerance": "cold_intolerance", "can't handle cold": "cold_intolerance",
    "can't get warm": "cold_intolerance", "hot flashes": "hot_flashes", "hot flushes": "hot_flashes",
    "low grade fever": "fever",
    # weakness & mobility
    "jelly legs": "weakness", "legs like jelly": "weakness", "feel like jelly": "weakness",
    "legs gave out": "weakness", "legs buckling": "weakness", "legs wobbly": "weakness",
    "lead limbs": "weakness", "heavy limbs": "weakness", "limbs feel heavy": "weakness",
    "legs like lead": "weakness",
    "can't walk": "mobility", "trouble walking": "mobility", "hard to walk": "mobility",
    "balance problems": "balance", "balance issues": "balance",
    # skin, eyes, mouth
    "butterfly rash": "malar_rash", "malar rash": "malar_rash",
    "sun sensitivity": "photosensitivity", "sun reactive": "photosensitivity",
    "hair falling out": "hair_loss", "losing hair": "hair_loss", "hair thinning": "hair_loss",
    "sensitive skin": "skin_sensitivity",
    "easy bruising": "easy_bruising", "bruise easily": "easy_bruising", "red spots": "petechiae",
    "wounds heal slowly": "slow_healing", "not healing": "slow_healing",
    "raynauds": "raynauds", "raynaud's": "raynauds", "fingers turn blue": "raynauds",
    "fingers turn white": "raynauds", "fingers go white": "raynauds", "fingers go blue": "raynauds",
    "dry mouth": "dry_mouth", "dry eyes": "dry_eyes", "eyes dry": "dry_eyes",
    "gritty eyes": "dry_eyes", "dry eyes and mouth": "sicca", "dry mouth and eyes": "sicca",
    "sore throat": "sore_throat",
    "mouth sores": "mouth_sores", "oral ulcers": "mouth_sores", "canker sores": "mouth_sores",
    "swollen knees": "swelling", "swollen joints": "swelling", "swollen ankles": "swelling",
    "swollen fingers": "swelling", "swollen hands": "swelling", "swollen feet": "swelling",
    "puffy face": "swelling", "puffy hands": "swelling",
    # urinary
    "need to pee": "urinary_urgency", "urinary urgency": "urinary_urgency",
    "frequent urination": "urinary_frequency", "peeing a lot": "urinary_frequency",
    "interstitial cystitis": "cystitis", "bladder pain": "cystitis",
    # hormonal
    "on my period": "menstruation", "time of month": "menstruation",
    "period cramps": "menstrual_cramps", "menstrual cramps": "menstrual_cramps",
    "period pain": "menstrual_cramps", "heavy period": "heavy_bleeding",
    "heavy flow": "heavy_bleeding", "heavy bleeding": "heavy_bleeding",
    "irregular period": "irregular_cycle", "irregular cycle": "irregular_cycle",
    "missed period": "missed_period", "late period": "late_period",
    "breast tenderness": "breast_tenderness", "sore breasts": "breast_tenderness",
    "hormonal imbalance": "hormonal", "hormone changes": "hormonal",
    # slang
    "feels like garbage": "malaise", "feel like garbage": "malaise",
    "feeling like garbage": "malaise", "feels like shit": "malaise", "feel like shit": "malaise",
    "feeling like shit": "malaise", "feels like ass": "malaise", "feel like ass": "malaise",
    "feeling like ass": "malaise", "feels like crap": "malaise", "feel like crap": "malaise",
    "feeling like crap": "malaise", "feels like hell": "malaise", "feel like hell": "malaise",
    "feeling like hell": "malaise", "feel like trash": "malaise", "feeling like trash": "malaise",
    "absolutely wrecked": "fatigue", "totally wrecked": "fatigue", "completely wrecked": "fatigue",
    "absolutely destroyed": "fatigue", "totally destroyed": "fatigue",
    "literally dead": "fatigue", "actually dead": "fatigue", "literally dying": "fatigue",
    "actually dying": "fatigue", "dead tired": "fatigue", "so dead": "fatigue",
    "im dead": "fatigue", "i'm dead": "fatigue",
    "lowkey dying": "fatigue", "highkey dying": "fatigue", "lowkey exhausted": "fatigue",
    "highkey exhausted": "fatigue", "low key dying": "fatigue", "high key dying": "fatigue",
    "absolutely exhausted": "fatigue", "literally exhausted": "fatigue",
    "absolutely drained": "fatigue", "literally drained": "fatigue",
    "so over this": "fatigue", "done with today": "fatigue", "body is done": "fatigue",
    "body gave up": "fatigue", "not functioning": "fatigue", "barely functioning": "fatigue",
    "nonfunctional": "fatigue",
    "head is fucked": "brain_fog",
}

# ---------- Display names ----------
SYMPTOM_DISPLAY_NAMES: Dict[str, str] = {
    # energy & fatigue
    "fatigue": "Fatigue",
    "extreme_fatigue": "Extreme Fatigue",
    "pem": "Post-Exertional Malaise (PEM)",
    "pem_crash": "PEM Crash",
    "severe_pem": "Severe PEM (bed/housebound)",
    "flare": "Flare-up",
    "burnout": "Burnout",
    "malaise": "General Malaise",
    "weakness": "Weakness",
    "muscle_weakness": "Muscle Weakness",
    "overexertion": "Overexertion",
    "activity_intolerance": "Activity Intolerance",
    "exercise_intolerance": "Exercise Intolerance",
    "delayed_recovery": "Delayed Recovery",
    "pacing_failure": "Pacing Failure",
    "pacing": "Pacing",
    "energy_envelope": "Energy Envelope",
    "spoon_theory": "Low Spoons",
    "boom_bust_cycle": "Boom-Bust Cycle",
    "push_crash_cycle": "Push-Crash Cycle",
    "symptom_fluctuation": "Symptom Fluctuation",
    "good_bad_day_cycle": "Good Day/Bad Day Cycle",
    "unpredictable_course": "Unpredictable Symptoms",
    "me_cfs": "ME/CFS",
    "long_covid": "Long COVID",
    "post_viral": "Post-Viral Illness",
    "fibromyalgia": "Fibromyalgia",
    # cognitive
    "brain_fog": "Brain Fog",
    "memory": "Memory Problems",
    "focus": "Difficulty Concentrating",
    "cognitive_dysfunction": "Cognitive Dysfunction",
    "executive_dysfunction": "Executive Dysfunction",
    "task_paralysis": "Task Paralysis",
    # pain
    "pain": "Pain (general)",
    "headache": "Headache",
    "muscle_pain": "Muscle Pain",
    "joint_pain": "Joint Pain",
    "back_pain": "Back Pain",
    "neck_pain": "Neck Pain",
    "chest_pain": "Chest Pain",
    "gi_pain": "Abdominal Pain",
    "skin_pain": "Skin Pain",
    "nerve_pain": "Nerve Pain",
    "allodynia": "Allodynia (painful touch)",
    "hyperalgesia": "Hyperalgesia",
    "coat_hanger_pain": "Coat Hanger Pain",
    # joints & mobility
    "subluxation": "Joint Subluxation",
    "dislocation": "Joint Dislocation",
    "hypermobility": "Hypermobility",
    "joint_instability": "Joint Instability",
    "stiffness": "Stiffness",
    "swelling": "Swelling",
    "inflammation": "Inflammation",
    "mobility": "Mobility Issues",
    "balance": "Balance Problems",
    # cardiovascular & autonomic
    "palpitations": "Heart Palpitations",
    "tachycardia": "Tachycardia (fast heart rate)",
    "bradycardia": "Bradycardia (slow heart rate)",
    "arrhythmia": "Heart Arrhythmia",
    "orthostatic": "Orthostatic Intolerance",
    "dysautonomia": "Dysautonomia",
    "presyncope": "Presyncope (near fainting)",
    "pre_syncope": "Presyncope (near fainting)",
    "syncope": "Syncope (fainting)",
    "blood_pooling": "Blood Pooling",
    "dizziness": "Dizziness",
    "fainting": "Fainting",
    "vertigo": "Vertigo",
    "high_blood_pressure": "High Blood Pressure",
    "low_blood_pressure": "Low Blood Pressure",
    "adrenaline_surge": "Adrenaline Surge",
    # gastrointestinal
    "digestive": "Digestive Issues",
    "nausea": "Nausea",
    "vomiting": "Vomiting",
    "bloating": "Bloating",
    "gi_cramping": "GI Cramping",
    "constipation": "Constipation",
    "diarrhea": "Diarrhea",
    "ibs": "IBS",
    "reflux": "Acid Reflux/GERD",
    "gastroparesis": "Gastroparesis",
    "early_satiety": "Early Satiety",
    "dysphagia": "Difficulty Swallowing",
    "food_intolerance": "Food Intolerance",
    # sleep
    "insomnia": "Insomnia",
    "sleep_disturbance": "Sleep Disturbance",
    "unrefreshing_sleep": "Unrefreshing Sleep",
    "hypersomnia": "Hypersomnia",
    "nightmares": "Nightmares",
    # neurological
    "numbness_tingling": "Numbness/Tingling",
    "paresthesia": "Paresthesia (pins and needles)",
    "tremor": "Tremor",
    "twitching": "Twitching",
    "spasm": "Muscle Spasm",
    "internal_vibrations": "Internal Vibrations",
    "brain_zaps": "Brain Zaps",
    "tinnitus": "Tinnitus (ringing in ears)",
    "sensory_distortion": "Sensory Distortion",
    # respiratory
    "shortness_of_breath": "Shortness of Breath",
    "air_hunger": "Air Hunger",
    "wheezing": "Wheezing",
    "cough": "Cough",
    "asthma_attack": "Asthma Attack",
    "chest_tightness": "Chest Tightness",
    "respiratory_infection": "Respiratory Infection",
    # mental health & mood
    "low_mood": "Low Mood",
    "anxiety": "Anxiety",
    "panic": "Panic Attack",
    "stress": "Stress",
    "overwhelmed": "Overwhelmed",
    "irritability": "Irritability",
    "frustration": "Frustration",
    "mood_swings": "Mood Swings",
    "mental_health": "Mental Health",
    "emotional_dysregulation": "Emotional Dysregulation",
    "racing_thoughts": "Racing Thoughts",
    "intrusive_thoughts": "Intrusive Thoughts",
    "rejection_sensitivity": "Rejection Sensitivity",
    "dissociation": "Dissociation",
    "depersonalization": "Depersonalization",
    "derealization": "Derealization",
    "suicidal_ideation": "Suicidal Ideation",
    "emptiness": "Emptiness",
    "worthlessness": "Worthlessness",
    "helplessness": "Helplessness",
    "despair": "Despair",
    "devastation": "Devastation",
    "grief": "Grief",
    "loneliness": "Loneliness",
    "rage": "Rage",
    "anger": "Anger",
    "resentment": "Resentment",
    "bitterness": "Bitterness",
    "hostility": "Hostility",
    "shame": "Shame",
    "guilt": "Guilt",
    "regret": "Regret",
    "humiliation": "Humiliation",
    "embarrassment": "Embarrassment",
    "rumination": "Rumination",
    "overthinking": "Overthinking",
    "thought_loops": "Thought Loops",
    "perseveration": "Perseveration",
    "perfectionism": "Perfectionism",
    "indecisiveness": "Indecisiveness",
    # neurodivergence & psychiatric
    "ptsd": "PTSD",
    "flashback": "Flashbacks",
    "ptsd_trigger": "Triggered (PTSD)",
    "hypervigilance": "Hypervigilance",
    "startle_response": "Startle Response",
    "ocd": "OCD",
    "obsessive_thoughts": "Obsessive Thoughts",
    "compulsions": "Compulsions",
    "checking_compulsions": "Checking Compulsions",
    "repetitive_behaviors": "Repetitive Behaviors",
    "adhd": "ADHD",
    "hyperfocus": "Hyperfocus",
    "hyperfixation": "Hyperfixation",
    "understimulation": "Understimulation",
    "overstimulation": "Overstimulation",
    "bipolar": "Bipolar",
    "mania": "Mania",
    "hypomania": "Hypomania",
    "elevated_mood": "Elevated Mood",
    "grandiosity": "Grandiosity",
    "autistic_traits": "Autistic Traits",
    "stimming": "Stimming",
    "autistic_meltdown": "Meltdown",
    "autistic_shutdown": "Shutdown",
    "masking": "Masking",
    "scripting": "Scripting",
    "bpd": "BPD",
    "splitting": "Splitting",
    "abandonment_fears": "Abandonment Fears",
    # eating & substances
    "eating_disorder": "Disordered Eating",
    "binge_eating": "Binge Eating",
    "purging": "Purging",
    "food_restriction": "Food Restriction",
    "undereating": "Undereating",
    "overeating": "Overeating",
    "substance_use": "Substance Use",
    "cravings": "Cravings",
    "withdrawal": "Withdrawal",
    # behaviour
    "social_withdrawal": "Social Withdrawal",
    "social_isolation": "Social Isolation",
    "avoidance": "Avoidance",
    "canceling_plans": "Canceling Plans",
    "hiding": "Hiding Away",
    "lack_of_motivation": "Lack of Motivation",
    "procrastination": "Procrastination",
    "jaw_clenching": "Jaw Clenching",
    "teeth_grinding": "Teeth Grinding",
    # temperature
    "temperature": "Temperature Dysregulation",
    "temperature_dysregulation": "Temperature Dysregulation",
    "sweating": "Sweating",
    "night_sweats": "Night Sweats",
    "chills": "Chills",
    "fever": "Fever",
    "heat_intolerance": "Heat Intolerance",
    "cold_intolerance": "Cold Intolerance",
    "flushing": "Flushing",
    "hot_flashes": "Hot Flashes",
    # sensory sensitivity
    "sensitivity_light": "Light Sensitivity",
    "light_sensitivity": "Light Sensitivity",
    "sensitivity_sound": "Sound Sensitivity",
    "sound_sensitivity": "Sound Sensitivity",
    "smell_sensitivity": "Smell Sensitivity",
    "sensory_overload": "Sensory Overload",
    "sound_distortion": "Sound Distortion",
    # appetite & weight
    "appetite": "Appetite Changes",
    "appetite_change": "Appetite Changes",
    "appetite_loss": "Loss of Appetite",
    "weight_change": "Weight Changes",
    "weight_gain": "Weight Gain",
    "weight_loss": "Weight Loss",
    "metabolic": "Metabolic Issues",
    # skin
    "rash": "Rash",
    "malar_rash": "Malar (Butterfly) Rash",
    "hives": "Hives",
    "itching": "Itching",
    "bruising": "Bruising",
    "easy_bruising": "Easy Bruising",
    "raynauds": "Raynaud's Phenomenon",
    "photosensitivity": "Sun Sensitivity",
    "skin_sensitivity": "Skin Sensitivity",
    "lump": "Lump/Swelling",
    "hair_loss": "Hair Loss",
    "petechiae": "Petechiae (tiny bruises)",
    "slow_healing": "Slow Wound Healing",
    # vision, hearing, mouth
    "vision_changes": "Vision Changes",
    "visual_disturbances": "Visual Disturbances",
    "visual_snow": "Visual Snow",
    "aura": "Migraine Aura",
    "dry_eyes": "Dry Eyes",
    "sicca": "Sicca (dry eyes/mouth)",
    "hearing_changes": "Hearing Changes",
    "dry_mouth": "Dry Mouth",
    "mouth_ulcers": "Mouth Ulcers",
    "mouth_sores": "Mouth Sores",
    "sore_throat": "Sore Throat",
    # urinary
    "urinary": "Urinary Issues",
    "urinary_frequency": "Frequent Urination",
    "urinary_urgency": "Urgent Urination",
    "cystitis": "Bladder Inflammation",
    # lymphatic & immune
    "swollen_lymph_nodes": "Swollen Lymph Nodes",
    "swollen_glands": "Swollen Glands",
    "frequent_infections": "Frequent Infections",
    "infection": "Infection",
    "infections": "Infections",
    "viral_reactivation": "Viral Reactivation",
    "ebv_reactivation": "EBV Reactivation",
    # hormonal & reproductive
    "hormonal": "Hormonal Issues",
    "menstruation": "Menstruation",
    "menstrual_cycle": "Menstrual Cycle",
    "menstrual_cramps": "Menstrual Cramps",
    "irregular_cycle": "Irregular Cycle",
    "missed_period": "Missed Period",
    "late_period": "Late Period",
    "heavy_bleeding": "Heavy Bleeding",
    "breast_tenderness": "Breast Tenderness",
    "spotting": "Spotting",
    "ovulation": "Ovulation",
    "pms": "PMS",
    "pmdd": "PMDD",
    # other
    "bleeding": "Bleeding",
    "flu_like": "Flu-like Symptoms",
    # smell & taste
    "anosmia": "Loss of Smell",
    "ageusia": "Loss of Taste",
    "dysgeusia": "Distorted Taste",
    "parosmia": "Distorted Smell",
    # allergic
    "mcas": "Mast Cell Activation (MCAS)",
    "allergic_reaction": "Allergic Reaction",
    "alcohol_intolerance": "Alcohol Intolerance",
}

# ---------- Quick check-in ----------
COMMON_SYMPTOMS: Tuple[str, ...] = (
    "fatigue",
    "pem",
    "brain_fog",
    "pain",
    "headache",
    "nausea",
    "dizziness",
    "insomnia",
    "anxiety",
    "low_mood",
    "muscle_weakness",
    "joint_pain",
)

COMMON_SYMPTOM_LABELS: Dict[str, str] = {
    "fatigue": "Fatigue",
    "pem": "PEM/Crash",
    "brain_fog": "Brain Fog",
    "pain": "General Pain",
    "headache": "Headache",
    "nausea": "Nausea",
    "dizziness": "Dizziness",
    "insomnia": "Sleep Issues",
    "anxiety": "Anxiety",
    "low_mood": "Low Mood",
    "muscle_weakness": "Muscle Weakness",
    "joint_pain": "Joint Pain",
}


def display_name(category: str) -> str:
    return SYMPTOM_DISPLAY_NAMES.get(category) or category.replace("_", " ").title()


def is_known_category(category: str) -> bool:
    return category in SYMPTOM_DISPLAY_NAMES


def longest_first(table: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Entries ordered by key length, longest first; ties keep insertion order."""
    return sorted(table.items(), key=lambda kv: len(kv[0]), reverse=True)


@lru_cache(maxsize=1)
def phrases_longest_first() -> Tuple[Tuple[str, str], ...]:
    return tuple(longest_first(SYMPTOM_PHRASES))


def merged_lemmas(custom: Mapping[str, str] = None) -> Dict[str, str]:
    """Built-in single-token lemmas overlaid with the single-token custom entries."""
    merged = dict(SYMPTOM_LEMMAS)
    for word, symptom in (custom or {}).items():
        if " " not in word:
            merged[word] = symptom
    return merged


__all__ = [
    "SYMPTOM_LEMMAS",
    "SYMPTOM_PHRASES",
    "SYMPTOM_DISPLAY_NAMES",
    "COMMON_SYMPTOMS",
    "COMMON_SYMPTOM_LABELS",
    "display_name",
    "is_known_category",
    "longest_first",
    "phrases_longest_first",
    "merged_lemmas",
]
