"""Country term table for the country detector.

Lowercase terms matched as substrings of the title/summary, weighted
3 = country name, 2 = capital/demonym/leader, 1 = ambiguous. Codes are
ISO 3166-1 alpha-2.
"""

COUNTRY_TERMS = (
    # Major English-speaking
    ("US", (("united states", 3), ("u.s.", 3), ("us ", 1), ("america", 2), ("american", 2), ("washington dc", 3), ("white house", 3), ("pentagon", 2), ("congress", 2), ("senate", 1), ("california", 3), ("new york", 2), ("texas", 3), ("florida", 3), ("chicago", 2), ("los angeles", 2), ("biden", 2), ("trump", 2), ("republican", 1), ("democrat", 1))),
    ("GB", (("united kingdom", 3), ("uk ", 2), ("u.k.", 3), ("britain", 3), ("british", 3), ("england", 3), ("english", 1), ("scotland", 3), ("scottish", 3), ("wales", 2), ("welsh", 2), ("london", 2), ("downing street", 3), ("westminster", 3), ("nhs", 2), ("starmer", 2), ("sunak", 2), ("labour", 1), ("tory", 2), ("tories", 2), ("mandelson", 2))),
    ("CA", (("canada", 3), ("canadian", 3), ("ottawa", 2), ("toronto", 2), ("trudeau", 3), ("quebec", 3), ("ontario", 2), ("alberta", 2), ("vancouver", 2))),
    ("AU", (("australia", 3), ("australian", 3), ("sydney", 2), ("melbourne", 2), ("canberra", 2), ("queensland", 2))),
    ("NZ", (("new zealand", 3), ("zealand", 2), ("kiwi", 1), ("auckland", 2), ("wellington", 1))),
    ("IE", (("ireland", 3), ("irish", 3), ("dublin", 2))),

    # Europe
    ("FR", (("france", 3), ("french", 3), ("paris", 2), ("macron", 3), ("élysée", 3))),
    ("DE", (("germany", 3), ("german", 3), ("berlin", 2), ("merkel", 3), ("scholz", 3), ("bundestag", 3), ("bundeswehr", 3))),
    ("IT", (("italy", 3), ("italian", 3), ("rome", 2), ("meloni", 3))),
    ("ES", (("spain", 3), ("spanish", 3), ("madrid", 2), ("barcelona", 1), ("sánchez", 3))),
    ("PT", (("portugal", 3), ("portuguese", 3), ("lisbon", 2))),
    ("NL", (("netherlands", 3), ("dutch", 3), ("amsterdam", 2), ("rotterdam", 2))),
    ("BE", (("belgium", 3), ("belgian", 3), ("brussels", 2))),
    ("SE", (("sweden", 3), ("swedish", 3), ("stockholm", 2))),
    ("NO", (("norway", 3), ("norwegian", 3), ("oslo", 2))),
    ("DK", (("denmark", 3), ("danish", 3), ("copenhagen", 2))),
    ("FI", (("finland", 3), ("finnish", 3), ("helsinki", 2))),
    ("PL", (("poland", 3), ("polish", 2), ("warsaw", 2))),
    ("GR", (("greece", 3), ("greek", 3), ("athens", 2))),
    ("AT", (("austria", 3), ("austrian", 3), ("vienna", 2))),
    ("CH", (("switzerland", 3), ("swiss", 3), ("zurich", 2), ("geneva", 2))),
    ("UA", (("ukraine", 3), ("ukrainian", 3), ("kyiv", 3), ("zelensky", 3), ("zelenskyy", 3))),
    ("RO", (("romania", 3), ("romanian", 3), ("bucharest", 2))),
    ("HU", (("hungary", 3), ("hungarian", 3), ("budapest", 2), ("orbán", 3), ("orban", 3))),
    ("CZ", (("czech", 3), ("czechia", 3), ("prague", 2))),

    # Russia & former Soviet
    ("RU", (("russia", 3), ("russian", 3), ("moscow", 2), ("kremlin", 3), ("putin", 3))),
    ("BY", (("belarus", 3), ("belarusian", 3), ("minsk", 2), ("lukashenko", 3))),
    ("GE", (("georgia", 2), ("georgian", 2), ("tbilisi", 3))),
    ("KZ", (("kazakhstan", 3), ("kazakh", 3))),

    # Middle East
    ("IL", (("israel", 3), ("israeli", 3), ("tel aviv", 3), ("jerusalem", 2), ("netanyahu", 3), ("idf", 2))),
    ("PS", (("palestine", 3), ("palestinian", 3), ("gaza", 3), ("west bank", 3), ("hamas", 2))),
    ("IR", (("iran", 3), ("iranian", 3), ("tehran", 3), ("khamenei", 3))),
    ("IQ", (("iraq", 3), ("iraqi", 3), ("baghdad", 3))),
    ("SY", (("syria", 3), ("syrian", 3), ("damascus", 3))),
    ("SA", (("saudi", 3), ("saudi arabia", 3), ("riyadh", 3))),
    ("AE", (("emirates", 3), ("uae", 3), ("dubai", 2), ("abu dhabi", 3))),
    ("TR", (("turkey", 3), ("turkish", 3), ("türkiye", 3), ("ankara", 2), ("istanbul", 2), ("erdogan", 3))),
    ("LB", (("lebanon", 3), ("lebanese", 3), ("beirut", 3), ("hezbollah", 2))),
    ("YE", (("yemen", 3), ("yemeni", 3), ("houthi", 3))),
    ("JO", (("jordan", 2), ("jordanian", 3), ("amman", 2))),
    ("AF", (("afghanistan", 3), ("afghan", 3), ("kabul", 3), ("taliban", 2))),

    # Asia
    ("CN", (("china", 3), ("chinese", 3), ("beijing", 3), ("shanghai", 2), ("xi jinping", 3))),
    ("JP", (("japan", 3), ("japanese", 3), ("tokyo", 2))),
    ("KR", (("south korea", 3), ("korean", 2), ("seoul", 2))),
    ("KP", (("north korea", 3), ("pyongyang", 3), ("kim jong", 3))),
    ("IN", (("india", 3), ("indian", 3), ("modi", 2), ("delhi", 2), ("mumbai", 2))),
    ("PK", (("pakistan", 3), ("pakistani", 3), ("islamabad", 3))),
    ("BD", (("bangladesh", 3), ("bangladeshi", 3), ("dhaka", 3))),
    ("MM", (("myanmar", 3), ("burmese", 3), ("burma", 3))),
    ("TH", (("thailand", 3), ("thai", 3), ("bangkok", 2))),
    ("VN", (("vietnam", 3), ("vietnamese", 3), ("hanoi", 3))),
    ("PH", (("philippines", 3), ("filipino", 3), ("manila", 2))),
    ("ID", (("indonesia", 3), ("indonesian", 3), ("jakarta", 3))),
    ("MY", (("malaysia", 3), ("malaysian", 3), ("kuala lumpur", 3))),
    ("SG", (("singapore", 3), ("singaporean", 3))),
    ("TW", (("taiwan", 3), ("taiwanese", 3), ("taipei", 3))),
    ("LK", (("sri lanka", 3), ("sri lankan", 3), ("colombo", 2))),
    ("NP", (("nepal", 3), ("nepalese", 3), ("kathmandu", 3))),

    # Africa
    ("ZA", (("south africa", 3), ("south african", 3), ("johannesburg", 2), ("cape town", 2), ("pretoria", 2))),
    ("NG", (("nigeria", 3), ("nigerian", 3), ("lagos", 2), ("abuja", 2))),
    ("KE", (("kenya", 3), ("kenyan", 3), ("nairobi", 2))),
    ("EG", (("egypt", 3), ("egyptian", 3), ("cairo", 2))),
    ("ET", (("ethiopia", 3), ("ethiopian", 3), ("addis ababa", 3))),
    ("SD", (("sudan", 3), ("sudanese", 3), ("khartoum", 3))),
    ("CD", (("congo", 2), ("congolese", 3), ("kinshasa", 3))),
    ("GH", (("ghana", 3), ("ghanaian", 3), ("accra", 2))),
    ("TZ", (("tanzania", 3), ("tanzanian", 3))),
    ("MA", (("morocco", 3), ("moroccan", 3), ("rabat", 2))),
    ("DZ", (("algeria", 3), ("algerian", 3))),
    ("TN", (("tunisia", 3), ("tunisian", 3))),
    ("LY", (("libya", 3), ("libyan", 3), ("tripoli", 2))),
    ("SO", (("somalia", 3), ("somali", 3), ("mogadishu", 3))),
    ("RW", (("rwanda", 3), ("rwandan", 3), ("kigali", 2))),

    # Americas
    ("MX", (("mexico", 3), ("mexican", 3), ("mexico city", 3), ("cartel", 1))),
    ("BR", (("brazil", 3), ("brazilian", 3), ("brasília", 3), ("são paulo", 2), ("lula", 3))),
    ("AR", (("argentina", 3), ("argentine", 3), ("buenos aires", 3), ("milei", 3))),
    ("CO", (("colombia", 3), ("colombian", 3), ("bogotá", 3))),
    ("VE", (("venezuela", 3), ("venezuelan", 3), ("caracas", 3), ("maduro", 3))),
    ("CL", (("chile", 3), ("chilean", 3), ("santiago", 2))),
    ("PE", (("peru", 3), ("peruvian", 3), ("lima", 2))),
    ("CU", (("cuba", 3), ("cuban", 3), ("havana", 3))),
    ("HT", (("haiti", 3), ("haitian", 3))),

    # Oceania
    ("FJ", (("fiji", 3), ("fijian", 3))),
    ("PG", (("papua new guinea", 3),)),
)
