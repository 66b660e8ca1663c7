DISALLOWED_WORDS = frozenset(
    {
        "anal", "anus", "arse", "arsed", "arsehole", "arseholes", "arses",
        "ass", "asses", "assfucker", "assfuckers", "asshat", "asshats", "asshole", "assholes",
        "asswipe", "asswipes", "assclown", "assclowns", "assface",
        "badass", "badasses", "bastard", "bastards", "bastardly",
        "bellend", "bellends", "bitch", "bitched", "bitches", "bitchin", "bitching", "bitchy",
        "blowjob", "blowjobs", "bollock", "bollocks", "boner", "boners",
        "boob", "boobs", "booty", "bugger", "buggered", "buggering", "buggers",
        "bullshit", "bullshits", "bullshitted", "bullshitter", "bullshitting",
        "butthole", "buttholes", "buttfucker",
        "chickenshit", "clit", "clits", "cock", "cocks", "cocksucker", "cocksuckers", "cocksucking",
        "coon", "coons", "crap", "crapped", "crapper", "crapping", "crappy", "craps",
        "cum", "cumming", "cums", "cumshot", "cunt", "cunts", "cuntface",
        "damn", "damned", "damnit", "damning", "damns", "dammit",
        "dick", "dickhead", "dickheads", "dickish", "dicks", "dickwad", "dickweed",
        "dildo", "dildos", "dipshit", "dipshits", "douche", "douchebag", "douchebags", "douches",
        "dumbass", "dumbasses", "dumbfuck", "dyke", "dykes",
        "fag", "fagged", "faggot", "faggots", "fags",
        "feck", "fecking", "fellatio",
        "fuck", "fucka", "fuckass", "fucked", "fucker", "fuckers", "fuckface", "fuckhead",
        "fuckheads", "fuckin", "fucking", "fuckoff", "fucks", "fuckup", "fuckups", "fuckwit",
        "fuckwits", "fudgepacker", "fuk", "fuking", "fukk", "fcuk", "fck", "fcking",
        "goddamn", "goddamned", "goddamnit", "godammit",
        "handjob", "hell", "hells", "ho", "hoe", "hoes", "homo", "horny",
        "jackass", "jackasses", "jackoff", "jerkoff", "jizz", "jizzed",
        "kike", "kikes", "knobhead", "knobend",
        "lmfao", "masturbate", "masturbated", "masturbates", "masturbating", "masturbation",
        "milf", "mofo", "motherfucker", "motherfuckers", "motherfucking", "muff",
        "nazi", "nigga", "niggas", "nigger", "niggers", "nob", "nutsack",
        "orgasm", "orgasms", "orgy",
        "pecker", "penis", "penises", "piss", "pissed", "pisser", "pisses", "pissing", "pissoff",
        "poon", "poontang", "porn", "porno", "pornography", "prick", "pricks",
        "pube", "pubes", "pussies", "pussy",
        "queef", "queer", "queers",
        "rape", "raped", "rapist", "retard", "retarded", "retards", "rimjob",
        "scrotum", "semen", "sex", "sexy", "shag", "shagged", "shagging",
        "shit", "shite", "shited", "shitface", "shitfaced", "shithead", "shitheads", "shithole",
        "shitholes", "shits", "shitted", "shitter", "shitting", "shitty",
        "skank", "skanks", "slag", "slut", "sluts", "slutty", "smegma", "spic", "spics", "spunk",
        "tit", "tits", "tittie", "titties", "titty", "tosser", "tossers", "turd", "turds",
        "twat", "twats", "vagina", "vaginas", "vulva",
        "wank", "wanked", "wanker", "wankers", "wanking", "wanks",
        "whore", "whores", "whoring", "wtf",
    }
)
