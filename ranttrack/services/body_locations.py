"""Pain qualifier and body-location tables.

Location lookup checks JOINT_LOCATIONS, then MUSCLE_LOCATIONS, then
BODY_PARTS, so "knee joint" resolves to a joint tag before the generic
"knee".
"""
from typing import Dict, Optional

PAIN_WORDS = {"pain", "hurt", "hurts", "hurting", "ache", "aches", "aching", "sore", "soreness"}

PAIN_QUALIFIERS: Dict[str, str] = {
    # sharp
    "sharp": "sharp", "stabbing": "stabbing", "piercing": "piercing", "shooting": "shooting",
    "knife-like": "sharp", "cutting": "sharp",
    # burning
    "burning": "burning", "searing": "burning", "scorching": "burning", "hot": "burning",
    "fire": "burning",
    # cramping
    "cramping": "cramping", "cramp": "cramping", "cramps": "cramping", "spasm": "cramping",
    "spasms": "cramping", "spasming": "cramping", "spasmodic": "cramping",
    # throbbing
    "throbbing": "throbbing", "pulsing": "throbbing", "pulsating": "throbbing",
    "pounding": "pounding", "beating": "throbbing",
    # dull
    "dull": "dull", "aching": "aching", "achy": "aching", "ache": "aching", "sore": "sore",
    # pressure
    "pressure": "pressure", "squeezing": "squeezing", "tight": "tight", "tightness": "tight",
    "constricting": "pressure",
    # radiating
    "radiating": "radiating", "spreading": "radiating",
    # nerve
    "electric": "electric", "electrical": "electric", "shocking": "electric", "zapping": "electric",
    "tingling": "tingling", "prickling": "prickling", "pins and needles": "paresthesia",
    "needle-like": "tingling", "pricking": "prickling",
    # persistence
    "grinding": "grinding", "gnawing": "gnawing", "nagging": "nagging", "relentless": "relentless",
    "constant": "constant", "unrelenting": "unrelenting", "persistent": "persistent",
    "ongoing": "persistent",
    # depth
    "deep": "deep", "superficial": "superficial", "surface": "superficial",
    "skin-level": "superficial", "widespread": "widespread", "diffuse": "diffuse",
    "localized": "localized", "focal": "localized", "all-over": "widespread",
    # movement
    "migrating": "migrating", "moving": "moving", "traveling": "traveling", "shifting": "shifting",
    "traveling down": "radiating",
    # metaphors
    "ice pick": "ice_pick", "hot poker": "hot_poker", "vice grip": "vice_like",
    "vice-like": "vice_like", "band-like": "band_like", "tightening band": "band_like",
    "tearing": "tearing", "ripping": "tearing", "stretching": "stretching", "pulling": "pulling",
    "tugging": "pulling", "sharp stab": "stabbing", "stinging": "stinging",
    "burning stab": "burning_sharp",
    # intensity
    "excruciating": "excruciating", "unbearable": "unbearable", "intense": "intense",
    "severe": "severe", "brutal": "severe", "wretched": "severe", "agonizing": "severe",
    "torturous": "severe",
}

BODY_PARTS: Dict[str, str] = {
    # head & neck
    "head": "head", "temple": "temple", "temples": "temple", "forehead": "forehead",
    "back of head": "back_of_head", "top of head": "top_of_head", "side of head": "side_of_head",
    "base of skull": "base_of_skull", "skull": "skull",
    "neck": "neck", "back of neck": "back_of_neck", "side of neck": "side_of_neck",
    "front of neck": "front_of_neck", "nape": "back_of_neck",
    "throat": "throat", "jaw": "jaw", "jawline": "jaw", "face": "face", "cheek": "cheek",
    "cheeks": "cheek", "eye": "eye", "eyes": "eye", "behind eyes": "behind_eyes",
    "sinus": "sinus", "sinuses": "sinus", "nose": "nose", "ear": "ear", "ears": "ear",
    # mouth
    "mouth": "mouth", "inside mouth": "inside_mouth", "roof of mouth": "roof_of_mouth",
    "tongue": "tongue", "gums": "gums", "teeth": "teeth", "tooth": "tooth",
    # upper body
    "shoulder": "shoulder", "shoulders": "shoulder", "left shoulder": "left_shoulder",
    "right shoulder": "right_shoulder", "shoulder blade": "shoulder_blade",
    "shoulder blades": "shoulder_blade", "rotator cuff": "rotator_cuff",
    "chest": "chest", "upper chest": "upper_chest", "lower chest": "lower_chest",
    "center of chest": "center_of_chest", "breastbone": "breastbone", "sternum": "sternum",
    "back": "back", "upper back": "upper_back", "mid back": "mid_back", "middle back": "mid_back",
    "lower back": "lower_back", "low back": "lower_back", "lumbar": "lower_back",
    "thoracic": "upper_back", "cervical": "neck",
    "spine": "spine", "tailbone": "tailbone", "coccyx": "tailbone", "sacrum": "sacrum",
    "ribs": "ribs", "rib": "rib", "side of ribs": "side_of_ribs", "rib cage": "rib_cage",
    # arms & hands
    "arm": "arm", "arms": "arm", "left arm": "left_arm", "right arm": "right_arm",
    "upper arm": "upper_arm", "lower arm": "lower_arm", "bicep": "bicep", "biceps": "bicep",
    "tricep": "tricep", "triceps": "tricep",
    "elbow": "elbow", "elbows": "elbow", "left elbow": "left_elbow", "right elbow": "right_elbow",
    "elbow joint": "elbow", "forearm": "forearm", "forearms": "forearm",
    "wrist": "wrist", "wrists": "wrist", "left wrist": "left_wrist", "right wrist": "right_wrist",
    "wrist joint": "wrist",
    "hand": "hand", "hands": "hand", "left hand": "left_hand", "right hand": "right_hand",
    "palm": "palm", "palms": "palm", "back of hand": "back_of_hand",
    "finger": "finger", "fingers": "finger", "fingertip": "fingertip", "fingertips": "fingertip",
    "knuckle": "knuckle", "knuckles": "knuckle", "thumb": "thumb", "index finger": "index_finger",
    "middle finger": "middle_finger", "ring finger": "ring_finger", "pinky": "pinky",
    "pinky finger": "pinky",
    # hips & legs
    "hip": "hip", "hips": "hip", "left hip": "left_hip", "right hip": "right_hip",
    "hip joint": "hip", "hip flexor": "hip_flexor", "hip flexors": "hip_flexor",
    "leg": "leg", "legs": "leg", "left leg": "left_leg", "right leg": "right_leg",
    "upper leg": "upper_leg", "lower leg": "lower_leg",
    "thigh": "thigh", "thighs": "thigh", "left thigh": "left_thigh", "right thigh": "right_thigh",
    "front of thigh": "front_of_thigh", "back of thigh": "back_of_thigh",
    "inner thigh": "inner_thigh", "outer thigh": "outer_thigh",
    "quad": "quadricep", "quads": "quadricep", "quadricep": "quadricep", "quadriceps": "quadricep",
    "hamstring": "hamstring", "hamstrings": "hamstring",
    "knee": "knee", "knees": "knee", "left knee": "left_knee", "right knee": "right_knee",
    "knee joint": "knee", "kneecap": "kneecap", "behind knee": "behind_knee",
    "back of knee": "back_of_knee",
    "calf": "calf", "calves": "calf", "left calf": "left_calf", "right calf": "right_calf",
    "calf muscle": "calf", "shin": "shin", "shins": "shin", "shinbone": "shin",
    "ankle": "ankle", "ankles": "ankle", "left ankle": "left_ankle", "right ankle": "right_ankle",
    "ankle joint": "ankle",
    "foot": "foot", "feet": "foot", "left foot": "left_foot", "right foot": "right_foot",
    "top of foot": "top_of_foot", "bottom of foot": "bottom_of_foot", "sole": "bottom_of_foot",
    "sole of foot": "bottom_of_foot", "ball of foot": "ball_of_foot", "arch": "arch_of_foot",
    "arch of foot": "arch_of_foot", "instep": "arch_of_foot",
    "toe": "toe", "toes": "toe", "big toe": "big_toe", "little toe": "little_toe",
    "heel": "heel", "heels": "heel", "left heel": "left_heel", "right heel": "right_heel",
    "achilles": "achilles", "achilles tendon": "achilles",
    # abdomen
    "stomach": "stomach", "upper stomach": "upper_stomach", "lower stomach": "lower_stomach",
    "pit of stomach": "pit_of_stomach",
    "abdomen": "abdomen", "upper abdomen": "upper_abdomen", "lower abdomen": "lower_abdomen",
    "left abdomen": "left_abdomen", "right abdomen": "right_abdomen",
    "belly": "belly", "belly button": "belly_button", "navel": "belly_button",
    "gut": "gut", "intestines": "intestines",
    "side": "side", "sides": "side", "left side": "left_side", "right side": "right_side",
    "flank": "flank", "groin": "groin",
    # pelvis
    "pelvis": "pelvis", "pelvic": "pelvis", "pelvic floor": "pelvic_floor",
    "pelvic floor muscles": "pelvic_floor", "pubic bone": "pubic_bone", "pubis": "pubic_bone",
    "sit bones": "ischial_tuberosities", "sitting bones": "ischial_tuberosities",
    "ischial": "ischial_tuberosities", "ischial tuberosities": "ischial_tuberosities",
    "ischium": "ischial_tuberosities", "sacroiliac": "sacroiliac", "si joint area": "sacroiliac",
    # spine segments
    "cervical spine": "cervical_spine", "neck vertebra": "cervical_spine",
    "c1": "cervical_1", "c2": "cervical_2", "c3": "cervical_3", "c4": "cervical_4",
    "c5": "cervical_5", "c6": "cervical_6", "c7": "cervical_7",
    "thoracic spine": "thoracic_spine", "mid spine": "thoracic_spine",
    "mid back spine": "thoracic_spine",
    "lumbar spine": "lumbar_spine", "lower lumbar": "lumbar_spine",
    "l1": "lumbar_1", "l2": "lumbar_2", "l3": "lumbar_3", "l4": "lumbar_4", "l5": "lumbar_5",
    "lumbosacral": "lumbosacral", "l5-s1": "lumbosacral", "ls joint": "lumbosacral",
    "sacral spine": "sacral_spine", "s1": "s1", "s2": "s2", "s3": "s3", "s4": "s4", "s5": "s5",
    # lymph nodes
    "lymph node": "lymph_node", "lymph nodes": "lymph_node", "lymph": "lymph_node",
    "swollen lymph node": "swollen_lymph_node", "cervical nodes": "cervical_lymph_node",
    "neck nodes": "cervical_lymph_node", "neck lymph": "cervical_lymph_node",
    "under jaw": "submandibular_lymph_node", "under chin": "submandibular_lymph_node",
    "submandibular": "submandibular_lymph_node", "armpit": "axillary_lymph_node",
    "armpits": "axillary_lymph_node", "axillary": "axillary_lymph_node",
    "axilla": "axillary_lymph_node", "groin nodes": "inguinal_lymph_node",
    "groin lymph": "inguinal_lymph_node", "inguinal": "inguinal_lymph_node",
    "inner thigh nodes": "inguinal_lymph_node",
    # whole body
    "body": "whole_body", "everywhere": "whole_body", "all over": "whole_body",
    "whole body": "whole_body", "entire body": "whole_body",
}
# thoracic vertebrae t1..t12
BODY_PARTS.update({f"t{n}": f"thoracic_{n}" for n in range(1, 13)})

JOINT_LOCATIONS: Dict[str, str] = {
    "jaw joint": "tmj", "tmj": "tmj", "shoulder joint": "shoulder_joint",
    "elbow joint": "elbow_joint", "wrist joint": "wrist_joint", "finger joint": "finger_joint",
    "finger joints": "finger_joint", "knuckle": "knuckle_joint", "knuckles": "knuckle_joint",
    "hip joint": "hip_joint", "knee joint": "knee_joint", "ankle joint": "ankle_joint",
    "toe joint": "toe_joint", "spine joint": "spinal_joint", "facet joint": "facet_joint",
    "facet joints": "facet_joint", "si joint": "si_joint", "sacroiliac joint": "si_joint",
    "all joints": "all_joints", "every joint": "all_joints",
}

MUSCLE_LOCATIONS: Dict[str, str] = {
    "neck muscles": "neck_muscles", "shoulder muscles": "shoulder_muscles",
    "back muscles": "back_muscles", "upper back muscles": "upper_back_muscles",
    "lower back muscles": "lower_back_muscles", "chest muscles": "chest_muscles",
    "pec": "pectoral_muscle", "pecs": "pectoral_muscle", "pectoral": "pectoral_muscle",
    "pectorals": "pectoral_muscle", "bicep": "bicep_muscle", "biceps": "bicep_muscle",
    "tricep": "tricep_muscle", "triceps": "tricep_muscle", "forearm muscles": "forearm_muscles",
    "glute": "glute_muscle", "glutes": "glute_muscle", "gluteal": "glute_muscle",
    "quad": "quadricep_muscle", "quads": "quadricep_muscle", "quadricep": "quadricep_muscle",
    "quadriceps": "quadricep_muscle", "hamstring": "hamstring_muscle",
    "hamstrings": "hamstring_muscle", "calf muscle": "calf_muscle", "calf muscles": "calf_muscle",
    "all muscles": "all_muscles", "every muscle": "all_muscles",
}

# Location tag -> symptom category for pain mentions. Anything else is generic pain.
LOCATION_CATEGORIES: Dict[str, str] = {
    "head": "headache",
    "temple": "headache",
    "forehead": "headache",
    "neck": "neck_pain",
    "back": "back_pain",
    "upper_back": "back_pain",
    "lower_back": "back_pain",
    "stomach": "gi_pain",
    "abdomen": "gi_pain",
    "belly": "gi_pain",
    "chest": "chest_pain",
}


def find_location(phrase: str) -> Optional[str]:
    return JOINT_LOCATIONS.get(phrase) or MUSCLE_LOCATIONS.get(phrase) or BODY_PARTS.get(phrase)


def category_for_location(location: Optional[str]) -> str:
    if not location:
        return "pain"
    return LOCATION_CATEGORIES.get(location, "pain")


__all__ = [
    "PAIN_WORDS",
    "PAIN_QUALIFIERS",
    "BODY_PARTS",
    "JOINT_LOCATIONS",
    "MUSCLE_LOCATIONS",
    "LOCATION_CATEGORIES",
    "find_location",
    "category_for_location",
]
