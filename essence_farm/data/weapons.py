"""Weapon catalogue.

Format: one record per weapon, tags ordered (main, stat, skill).
Three-star weapons carry no skill tag (empty string).
Japanese tag labels are filled in from data.labels when not given.
"""

WEAPON_RECORDS: list[dict] = [
    # ★6
    {"id": "grand-vision", "name": "Grand Vision", "name_jp": "グランドビジョン",
     "rarity": 6, "type": "Sword", "tags": ["Agility", "Attack", "Infliction"]},
    {"id": "forgeborn-scathe", "name": "Forgeborn Scathe", "name_jp": "炉生の災刃",
     "rarity": 6, "type": "Sword", "tags": ["Intellect", "Heat DMG", "Twilight"]},
    {"id": "thermite-cutter", "name": "Thermite Cutter", "name_jp": "テルミットカッター",
     "rarity": 6, "type": "Sword", "tags": ["Will", "Attack", "Flow"]},
    {"id": "umbral-torch", "name": "Umbral Torch", "name_jp": "アンブラルトーチ",
     "rarity": 6, "type": "Sword", "tags": ["Intellect", "Heat DMG", "Infliction"]},
    {"id": "exemplar", "name": "Exemplar", "name_jp": "エグゼンプラー",
     "rarity": 6, "type": "Greatsword", "tags": ["Main Attribute", "Attack", "Suppression"]},
    {"id": "former-finery", "name": "Former Finery", "name_jp": "往日の華服",
     "rarity": 6, "type": "Greatsword", "tags": ["Will", "HP", "Efficacy"]},
    {"id": "khravengger", "name": "Khravengger", "name_jp": "クラヴェンガー",
     "rarity": 6, "type": "Greatsword", "tags": ["Strength", "Attack", "Detonate"]},
    {"id": "valiant", "name": "Valiant", "name_jp": "ヴァリアント",
     "rarity": 6, "type": "Polearm", "tags": ["Agility", "Physical DMG", "Combative"]},
    {"id": "mountain-bearer", "name": "Mountain Bearer", "name_jp": "負山",
     "rarity": 6, "type": "Polearm", "tags": ["Agility", "Physical DMG", "Efficacy"]},
    {"id": "clannibal", "name": "Clannibal", "name_jp": "クランニバル",
     "rarity": 6, "type": "Handcannon", "tags": ["Main Attribute", "Arts DMG", "Infliction"]},
    {"id": "navigator", "name": "Navigator", "name_jp": "ナビゲーター",
     "rarity": 6, "type": "Handcannon", "tags": ["Intellect", "Cryo DMG", "Infliction"]},
    {"id": "dreams-of-the-starry-beach", "name": "Dreams of the Starry Beach",
     "name_jp": "星浜の夢", "rarity": 6, "type": "Arts Unit",
     "tags": ["Intellect", "Treatment Efficiency", "Infliction"]},
    {"id": "delivery-guaranteed", "name": "Delivery Guaranteed", "name_jp": "配達保証",
     "rarity": 6, "type": "Arts Unit", "tags": ["Will", "Ultimate Gain", "Pursuit"]},
    {"id": "chimeric-justice", "name": "Chimeric Justice", "name_jp": "キメラの正義",
     "rarity": 6, "type": "Arts Unit", "tags": ["Strength", "Ultimate Gain", "Brutality"]},

    # ★5
    {"id": "rapid-ascent", "name": "Rapid Ascent", "name_jp": "ラピッドアセント",
     "rarity": 5, "type": "Sword", "tags": ["Agility", "Physical DMG", "Twilight"]},
    {"id": "finishing-call", "name": "Finishing Call", "name_jp": "フィニッシングコール",
     "rarity": 5, "type": "Sword", "tags": ["Strength", "HP", "Medicant"]},
    {"id": "sundering-steel", "name": "Sundering Steel", "name_jp": "断鋼",
     "rarity": 5, "type": "Sword", "tags": ["Agility", "Attack", "Crusher"]},
    {"id": "seeker-of-dark-lung", "name": "Seeker of Dark Lung", "name_jp": "暗肺の探求者",
     "rarity": 5, "type": "Greatsword", "tags": ["Strength", "Physical DMG", "Pursuit"]},
    {"id": "ancient-canal", "name": "Ancient Canal", "name_jp": "古運河",
     "rarity": 5, "type": "Greatsword", "tags": ["Strength", "Arts Intensity", "Brutality"]},
    {"id": "chivalric-virtues", "name": "Chivalric Virtues", "name_jp": "騎士の美徳",
     "rarity": 5, "type": "Polearm", "tags": ["Will", "HP", "Medicant"]},
    {"id": "aggeloslayer", "name": "Aggeloslayer", "name_jp": "アゲロスレイヤー",
     "rarity": 5, "type": "Polearm", "tags": ["Strength", "Attack", "Pursuit"]},
    {"id": "wedge", "name": "Wedge", "name_jp": "ウェッジ",
     "rarity": 5, "type": "Handcannon", "tags": ["Main Attribute", "Crit Rate", "Infliction"]},
    {"id": "howling-guard", "name": "Howling Guard", "name_jp": "ハウリングガード",
     "rarity": 5, "type": "Handcannon", "tags": ["Intellect", "Attack", "Combative"]},
    {"id": "opus-etch-figure", "name": "Opus: Etch Figure", "name_jp": "作品：蝕像",
     "rarity": 5, "type": "Arts Unit", "tags": ["Will", "Nature DMG", "Suppression"]},
    {"id": "stanza-of-memorials", "name": "Stanza of Memorials", "name_jp": "追憶の詩節",
     "rarity": 5, "type": "Arts Unit", "tags": ["Intellect", "Attack", "Twilight"]},
    {"id": "wild-wanderer", "name": "Wild Wanderer", "name_jp": "荒野の放浪者",
     "rarity": 5, "type": "Arts Unit", "tags": ["Intellect", "Electric DMG", "Infliction"]},

    # ★4
    {"id": "contingent-measure", "name": "Contingent Measure", "name_jp": "臨時措置",
     "rarity": 4, "type": "Sword", "tags": ["Agility", "Physical DMG", "Suppression"]},
    {"id": "fortmaker", "name": "Fortmaker", "name_jp": "フォートメーカー",
     "rarity": 4, "type": "Greatsword", "tags": ["Strength", "Attack", "Inspiring"]},
    {"id": "pathfinders-beacon", "name": "Pathfinder's Beacon", "name_jp": "開拓者の灯",
     "rarity": 4, "type": "Polearm", "tags": ["Agility", "Attack", "Inspiring"]},
    {"id": "long-road", "name": "Long Road", "name_jp": "長い道のり",
     "rarity": 4, "type": "Handcannon", "tags": ["Strength", "Electric DMG", "Pursuit"]},
    {"id": "hypernova-auto", "name": "Hypernova Auto", "name_jp": "ハイパーノヴァ・オート",
     "rarity": 4, "type": "Arts Unit", "tags": ["Intellect", "Arts Intensity", "Combative"]},
    {"id": "oblivion", "name": "Oblivion", "name_jp": "オブリビオン",
     "rarity": 4, "type": "Arts Unit", "tags": ["Intellect", "Arts DMG", "Twilight"]},

    # ★3
    {"id": "tarr-11", "name": "Tarr 11", "name_jp": "ター11",
     "rarity": 3, "type": "Sword", "tags": ["Agility", "Attack", ""]},
    {"id": "industry-0-1", "name": "Industry 0.1", "name_jp": "インダストリー0.1",
     "rarity": 3, "type": "Greatsword", "tags": ["Strength", "Attack", ""]},
    {"id": "darhoff-7", "name": "Darhoff 7", "name_jp": "ダーホフ7",
     "rarity": 3, "type": "Polearm", "tags": ["Agility", "HP", ""]},
    {"id": "peco-5", "name": "Peco 5", "name_jp": "ペコ5",
     "rarity": 3, "type": "Handcannon", "tags": ["Main Attribute", "Attack", ""]},
    {"id": "jiminy-12", "name": "Jiminy 12", "name_jp": "ジミニー12",
     "rarity": 3, "type": "Arts Unit", "tags": ["Intellect", "Attack", ""]},
]
