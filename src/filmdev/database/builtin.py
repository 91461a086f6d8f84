"""
Bundled reference data.

Same document layout as an external JSON database file. Process-map keys use
the naming found in real data sets: plain ids ("d76"), stock and kit markers
("d76_stock", "cinestill_cs41_kit"), dilution markers ("rodinal_1_50"),
single-letter dilution variants ("hc110_b") and long vendor keys
("kodak_flexicolor_c41").

References:
- Kodak and Ilford technical data sheets
- The Massive Dev Chart (community data)
"""

from typing import Any

_C41_TEMPERATURE = 37.8
_E6_TEMPERATURE = 38.0

BUILTIN_DATABASE: dict[str, Any] = {
    "metadata": {
        "version": "1.0.0",
        "last_updated": "2024-01-15",
    },
    "temperature_compensation": {
        "15": 1.8,
        "16": 1.6,
        "17": 1.45,
        "18": 1.3,
        "19": 1.15,
        "20": 1.0,
        "21": 0.9,
        "22": 0.8,
        "23": 0.72,
        "24": 0.65,
        "25": 0.6,
        "26": 0.55,
        "27": 0.5,
        "28": 0.46,
        "29": 0.42,
        "30": 0.38,
    },
    "push_pull_compensation": {
        "-2": 0.5,
        "-1": 0.7,
        "0": 1.0,
        "1": 1.4,
        "2": 2.0,
        "3": 2.8,
    },
    "films": {
        "tri-x-400": {
            "name": "Kodak Tri-X 400",
            "manufacturer": "Kodak",
            "iso": 400,
            "type": "black_white",
            "process": "B&W",
            "description": (
                "Classic high-speed black and white film with excellent latitude "
                "and distinctive grain structure."
            ),
            "characteristics": "High contrast, excellent push capability, iconic grain pattern",
            "grain": "Medium",
            "contrast": "High",
            "best_uses": ["street", "documentary", "low light"],
            "developers": {
                "d76": {"time_minutes": 8.0, "dilution": "1:1"},
                "d76_stock": {
                    "time_minutes": 6.75,
                    "dilution": "stock",
                    "push_1_stop_minutes": 9.5,
                    "push_2_stop_minutes": 13.0,
                },
                "hc110_b": {"time_minutes": 3.75, "dilution": "1:31"},
                "rodinal_1_25": {"time_minutes": 9.0, "dilution": "1:25"},
                "id11": {"time_minutes": 8.5, "dilution": "1:1"},
                "xtol": {"time_minutes": 7.0, "dilution": "1:1"},
            },
        },
        "hp5-400": {
            "name": "Ilford HP5 Plus 400",
            "manufacturer": "Ilford",
            "iso": 400,
            "type": "black_white",
            "process": "B&W",
            "description": (
                "Versatile black and white film with excellent exposure latitude "
                "and smooth tonal gradation."
            ),
            "characteristics": "Smooth tonality, excellent latitude, fine grain for 400 speed",
            "grain": "Medium",
            "contrast": "Medium",
            "developers": {
                "d76": {"time_minutes": 9.0, "dilution": "1:1"},
                "hc110_b": {"time_minutes": 5.0, "dilution": "1:31"},
                "id11": {"time_minutes": 9.5, "dilution": "1:1"},
                "ilfosol3": {"time_minutes": 6.0, "dilution": "1:9"},
                "microphen": {
                    "time_minutes": 7.5,
                    "dilution": "1:1",
                    "push_1_stop_minutes": 10.0,
                    "push_2_stop_minutes": 13.0,
                    "push_3_stop_minutes": 16.5,
                },
            },
        },
        "tmax-400": {
            "name": "Kodak T-Max 400",
            "manufacturer": "Kodak",
            "iso": 400,
            "type": "black_white",
            "process": "B&W",
            "description": "Tabular grain film with exceptional sharpness and fine grain.",
            "characteristics": "Extremely fine grain, high sharpness, excellent shadow detail",
            "grain": "Fine",
            "contrast": "Medium",
            "developers": {
                "d76": {"time_minutes": 7.0, "dilution": "1:1"},
                "hc110_b": {"time_minutes": 6.0, "dilution": "1:31"},
                "xtol": {"time_minutes": 6.5, "dilution": "1:1"},
                "tmax": {"time_minutes": 6.0, "dilution": "1:4"},
            },
        },
        "delta-400": {
            "name": "Ilford Delta 400",
            "manufacturer": "Ilford",
            "iso": 400,
            "type": "black_white",
            "process": "B&W",
            "description": "Core-shell crystal film delivering fine grain at 400 speed.",
            "characteristics": "Ultra-fine grain, high acutance, excellent tonal range",
            "grain": "Fine",
            "contrast": "Medium",
            "developers": {
                "id11": {"time_minutes": 8.5, "dilution": "1:1"},
                "ilfosol3": {"time_minutes": 5.5, "dilution": "1:9"},
                "microphen": {"time_minutes": 7.0, "dilution": "1:1"},
                "perceptol": {"time_minutes": 12.0, "dilution": "1:1"},
            },
        },
        "fp4-125": {
            "name": "Ilford FP4 Plus 125",
            "manufacturer": "Ilford",
            "iso": 125,
            "type": "black_white",
            "process": "B&W",
            "description": "Medium speed film balancing fine grain, sharpness and tonality.",
            "characteristics": "Fine grain, excellent sharpness, smooth tonal gradation",
            "grain": "Fine",
            "contrast": "Medium",
            "developers": {
                "d76": {"time_minutes": 7.5, "dilution": "1:1"},
                "id11": {"time_minutes": 8.0, "dilution": "1:1"},
                "ilfosol3": {"time_minutes": 5.0, "dilution": "1:9"},
                "perceptol": {"time_minutes": 10.0, "dilution": "1:1"},
            },
        },
        "tmax-100": {
            "name": "Kodak T-Max 100",
            "manufacturer": "Kodak",
            "iso": 100,
            "type": "black_white",
            "process": "B&W",
            "description": "Extremely fine grain film with outstanding sharpness.",
            "characteristics": "Finest grain available, maximum sharpness, excellent contrast",
            "grain": "Extra fine",
            "contrast": "Medium",
            "developers": {
                "d76": {"time_minutes": 6.0, "dilution": "1:1"},
                "hc110_b": {"time_minutes": 5.0, "dilution": "1:31"},
                "xtol": {"time_minutes": 5.5, "dilution": "1:1"},
                "tmax": {"time_minutes": 5.0, "dilution": "1:4"},
            },
        },
        "acros-100": {
            "name": "Fuji Acros 100 II",
            "manufacturer": "Fujifilm",
            "iso": 100,
            "type": "black_white",
            "process": "B&W",
            "description": "Ultra-fine grain film with exceptional reciprocity characteristics.",
            "characteristics": "Ultra-fine grain, excellent reciprocity, high resolution",
            "grain": "Extra fine",
            "contrast": "Medium",
            "alternative_names": ["Neopan Acros 100"],
            "developers": {
                "d76": {"time_minutes": 6.5, "dilution": "1:1"},
                "hc110_b": {"time_minutes": 5.5, "dilution": "1:31"},
                "rodinal_1_50": {"time_minutes": 7.0, "dilution": "1:50"},
                "xtol": {"time_minutes": 6.0, "dilution": "1:1"},
            },
        },
        "pan-f-50": {
            "name": "Ilford Pan F Plus 50",
            "manufacturer": "Ilford",
            "iso": 50,
            "type": "black_white",
            "process": "B&W",
            "description": "Slow film delivering outstanding image quality and detail.",
            "characteristics": "Finest grain, maximum detail, excellent contrast control",
            "grain": "Extra fine",
            "contrast": "High",
            "developers": {
                "id11": {"time_minutes": 6.5, "dilution": "1:1"},
                "ilfosol3": {"time_minutes": 4.0, "dilution": "1:9"},
                "perceptol": {"time_minutes": 8.0, "dilution": "1:1"},
                "microphen": {"time_minutes": 5.5, "dilution": "1:1"},
            },
        },
        "portra-400": {
            "name": "Kodak Portra 400",
            "manufacturer": "Kodak",
            "iso": 400,
            "type": "color_negative",
            "process": "C-41",
            "description": "Professional portrait film with natural skin tones and wide latitude.",
            "characteristics": "Fine grain, natural colors, exceptional latitude",
            "grain": "Fine",
            "contrast": "Low",
            "developers": {
                "kodak_flexicolor_c41": {
                    "developer_time_minutes": 3.25,
                    "temperature_c": _C41_TEMPERATURE,
                    "push_1_stop_dev_time": 4.0,
                    "push_2_stop_dev_time": 5.5,
                },
                "cinestill_cs41_kit": {
                    "developer_time_minutes": 3.5,
                    "temperature_c": 39.0,
                },
            },
        },
        "ektar-100": {
            "name": "Kodak Ektar 100",
            "manufacturer": "Kodak",
            "iso": 100,
            "type": "color_negative",
            "process": "C-41",
            "description": "Ultra-vivid color negative film with the finest grain in its class.",
            "characteristics": "Saturated colors, ultra-fine grain",
            "grain": "Extra fine",
            "contrast": "Medium",
            "developers": {
                "kodak_flexicolor_c41": {
                    "developer_time_minutes": 3.25,
                    "temperature_c": _C41_TEMPERATURE,
                },
            },
        },
        "ektachrome-e100": {
            "name": "Kodak Ektachrome E100",
            "manufacturer": "Kodak",
            "iso": 100,
            "type": "slide",
            "process": "E-6",
            "description": "Color reversal film with clean whites and neutral color.",
            "characteristics": "Neutral color, extremely fine grain, moderate contrast",
            "grain": "Extra fine",
            "contrast": "Medium",
            "developers": {
                "kodak_e6_kit": {
                    "first_dev_time_minutes": 6.0,
                    "temperature_c": _E6_TEMPERATURE,
                    "push_1_stop_first_dev_time": 8.5,
                    "push_2_stop_first_dev_time": 11.0,
                },
                "tetenal_colortec_e6": {
                    "first_dev_time_minutes": 6.5,
                    "temperature_c": _E6_TEMPERATURE,
                },
            },
        },
        "velvia-50": {
            "name": "Fujifilm Velvia 50",
            "manufacturer": "Fujifilm",
            "iso": 50,
            "type": "slide",
            "process": "E-6",
            "description": "High saturation reversal film favored for landscapes.",
            "characteristics": "Very high saturation, high contrast, extremely fine grain",
            "grain": "Extra fine",
            "contrast": "High",
            "developers": {
                "tetenal_colortec_e6": {
                    "first_dev_time_minutes": 6.5,
                    "temperature_c": _E6_TEMPERATURE,
                },
            },
        },
    },
    "developers": {
        "d76": {
            "name": "Kodak D-76",
            "manufacturer": "Kodak",
            "type": "Powder",
            "description": "Classic general-purpose developer balancing grain, detail and contrast.",
            "characteristics": "Balanced grain/sharpness, excellent shadow detail",
            "dilutions": ["stock", "1:1", "1:2"],
            "shelf_life": "Stock: 6 months, Working: 24 hours",
            "capacity": "120 rolls per liter (stock solution)",
        },
        "hc110": {
            "name": "Kodak HC-110",
            "manufacturer": "Kodak",
            "type": "Liquid Concentrate",
            "description": "Highly concentrated liquid developer with excellent keeping properties.",
            "characteristics": "Long shelf life, consistent results, contrast control",
            "dilutions": ["1:15 (Dilution A)", "1:31 (Dilution B)", "1:63 (Dilution E)"],
            "shelf_life": "Concentrate: 2+ years, Working: Single use",
            "capacity": "Single use recommended",
        },
        "id11": {
            "name": "Ilford ID-11",
            "manufacturer": "Ilford",
            "type": "Powder",
            "description": "Fine grain developer similar to D-76, optimized for Ilford films.",
            "characteristics": "Fine grain, excellent tonality",
            "dilutions": ["stock", "1:1", "1:3"],
            "shelf_life": "Stock: 6 months, Working: 24 hours",
            "capacity": "120 rolls per liter (stock solution)",
        },
        "ilfosol3": {
            "name": "Ilford Ilfosol 3",
            "manufacturer": "Ilford",
            "type": "Liquid Concentrate",
            "description": "One-shot liquid developer providing fine grain and sharpness.",
            "characteristics": "One-shot convenience, fine grain, excellent sharpness",
            "dilutions": ["1:9", "1:14"],
            "shelf_life": "Concentrate: 18 months, Working: Single use",
            "capacity": "Single use only",
        },
        "rodinal": {
            "name": "Agfa Rodinal",
            "manufacturer": "Agfa",
            "type": "Liquid Concentrate",
            "description": "High acutance developer known for sharpness and edge effects.",
            "characteristics": "Maximum sharpness, edge effects, distinctive grain",
            "dilutions": ["1:25", "1:50", "1:100"],
            "shelf_life": "Concentrate: 10+ years, Working: Single use",
            "capacity": "Single use recommended",
            "safety_notes": "Contains p-aminophenol; wear gloves",
        },
        "xtol": {
            "name": "Kodak Xtol",
            "manufacturer": "Kodak",
            "type": "Powder",
            "description": "Ascorbic acid developer with fine grain and excellent shadow detail.",
            "characteristics": "Fine grain, excellent shadow detail, low toxicity",
            "dilutions": ["stock", "1:1", "1:2", "1:3"],
            "shelf_life": "Stock: 6 months, Working: 24 hours",
            "capacity": "120 rolls per liter (stock solution)",
        },
        "microphen": {
            "name": "Ilford Microphen",
            "manufacturer": "Ilford",
            "type": "Powder",
            "description": "Speed-enhancing developer, up to one stop gain with fine grain.",
            "characteristics": "Speed enhancement, fine grain, push processing specialist",
            "dilutions": ["stock", "1:1", "1:3"],
            "shelf_life": "Stock: 6 months, Working: 24 hours",
            "capacity": "120 rolls per liter (stock solution)",
        },
        "perceptol": {
            "name": "Ilford Perceptol",
            "manufacturer": "Ilford",
            "type": "Powder",
            "description": "Ultra-fine grain developer for maximum grain refinement.",
            "characteristics": "Ultra-fine grain, maximum detail",
            "dilutions": ["stock", "1:1", "1:3"],
            "shelf_life": "Stock: 6 months, Working: 24 hours",
            "capacity": "120 rolls per liter (stock solution)",
        },
        "tmax": {
            "name": "Kodak T-Max Developer",
            "manufacturer": "Kodak",
            "type": "Liquid Concentrate",
            "description": "Liquid developer designed for T-Max films, good for push processing.",
            "characteristics": "Full film speed, clean highlights",
            "dilutions": ["1:4"],
            "shelf_life": "Concentrate: 2 years, Working: 24 hours",
            "capacity": "24 rolls per liter (working solution)",
        },
        "kodak_flexicolor": {
            "name": "Kodak Flexicolor C-41",
            "manufacturer": "Kodak",
            "type": "Kit",
            "description": "Standard C-41 color negative process chemistry.",
            "characteristics": "Reference C-41 results, tight temperature tolerance",
            "dilutions": ["Ready to use"],
            "shelf_life": "Working: 6 weeks",
            "capacity": "16 rolls per liter",
            "safety_notes": "Contains CD-4 color developer; wear nitrile gloves and ventilate",
        },
        "cinestill_cs41": {
            "name": "CineStill Cs41",
            "manufacturer": "CineStill",
            "type": "Kit",
            "description": "Two-bath liquid C-41 kit for home processing.",
            "characteristics": "Simple two-bath process, reusable working solution",
            "dilutions": ["Ready to use"],
            "shelf_life": "Working: 2 months",
            "capacity": "24 rolls per liter",
            "safety_notes": "Contains CD-4 color developer; wear nitrile gloves and ventilate",
        },
        "kodak_e6": {
            "name": "Kodak E-6 Process Kit",
            "manufacturer": "Kodak",
            "type": "Kit",
            "description": "Six-bath E-6 reversal process chemistry.",
            "characteristics": "Reference E-6 results",
            "dilutions": ["Ready to use"],
            "shelf_life": "Working: 4 weeks",
            "capacity": "12 rolls per liter",
        },
        "tetenal_colortec": {
            "name": "Tetenal Colortec E-6",
            "manufacturer": "Tetenal",
            "type": "Kit",
            "description": "Three-bath E-6 kit for home processing.",
            "characteristics": "Simplified three-bath process",
            "dilutions": ["Ready to use"],
            "shelf_life": "Working: 4 weeks",
            "capacity": "12 rolls per liter",
        },
    },
}
