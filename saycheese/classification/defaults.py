"""Built-in Telugu keyword lists."""

ACTORS = (
    "prabhas", "mahesh babu", "allu arjun", "ram charan", "jr ntr", "ntr",
    "chiranjeevi", "pawan kalyan", "vijay deverakonda", "nani", "rana daggubati",
    "ravi teja", "naga chaitanya", "nagarjuna", "venkatesh", "balakrishna",
    "sai dharam tej", "varun tej", "sharwanand", "nithiin", "gopichand",
    "kalyan ram", "bellamkonda sreenivas", "sudheer babu", "adivi sesh",
)

ACTRESSES = (
    "samantha", "rashmika mandanna", "pooja hegde", "kajal aggarwal",
    "anushka shetty", "tamannaah", "keerthy suresh", "rakul preet singh",
    "pragya jaiswal", "mehreen pirzada", "raashi khanna", "sai pallavi",
    "nivetha thomas", "regina cassandra", "lavanya tripathi", "hebah patel",
)

DIRECTORS = (
    "ss rajamouli", "rajamouli", "trivikram", "koratala siva", "sukumar",
    "vamshi paidipally", "harish shankar", "anil ravipudi", "boyapati sreenu",
    "krish jagarlamudi", "maruthi", "parasuram", "gopichand malineni",
    "srinu vaitla", "puri jagannadh", "vv vinayak", "dil raju", "allu aravind",
)

# Needs regular refreshing as releases come and go
MOVIES = (
    "kalki 2898 ad", "devara", "pushpa 2", "rrr", "radhe shyam", "acharya",
    "liger", "godfather", "bheemla nayak", "sarkaru vaari paata", "major",
    "ante sundaraniki", "vikram", "kgf chapter 2", "beast", "jersey",
    "love story", "vakeel saab", "krack", "ala vaikunthapurramuloo",
    "sarileru neekevvaru", "disco raja", "world famous lover",
    "coolie", "war 2", "pushpa the rule", "game changer", "rc 16",
)

ANTICIPATED_MOVIES = ("coolie", "war 2", "pushpa 2", "devara", "kalki 2898 ad")

POLITICIANS = (
    "kcr", "k chandrashekar rao", "ktr", "k t rama rao", "revanth reddy",
    "jagan", "ys jagan", "chandrababu naidu", "pawan kalyan", "harish rao",
    "kavitha", "sabitha indra reddy", "etela rajender", "bandi sanjay",
    "kishan reddy", "asaduddin owaisi", "akbaruddin owaisi",
)

PLACES = (
    "hyderabad", "secunderabad", "warangal", "nizamabad", "karimnagar",
    "khammam", "telangana", "andhra pradesh", "vijayawada", "visakhapatnam",
    "tirupati", "guntur", "kurnool", "nellore", "chittoor", "kadapa",
    "anantapur", "srikakulam", "vizianagaram", "hitec city", "hitech city",
    "cyberabad", "gachibowli", "madhapur", "kondapur", "banjara hills",
    "jubilee hills", "film nagar", "annapurna studios", "ramoji film city",
)

PARTIES = (
    "trs", "brs", "tdp", "ysrcp", "janasena", "congress telangana",
    "bjp telangana", "mim", "aimim", "cpi", "cpm", "tjs",
)

PRODUCTION_HOUSES = (
    "mythri movie makers", "geetha arts", "sri venkateswara creations",
    "haarika hassine creations", "sithara entertainments", "aditya music",
    "lahari music", "sony music south", "anil sunkara", "dil raju productions",
)

MEDIA_CHANNELS = (
    "tv9 telugu", "ntv", "etv telugu", "greatandhra", "idream filmnagar",
    "eenadu", "sakshi", "andhra jyothy", "telangana today", "hans india",
    "123telugu", "gulte", "tupaki", "cinejosh", "mirchi9", "telugu cinema",
)

SPORTS = (
    "cricket", "ipl", "srh", "sunrisers hyderabad", "kabaddi", "badminton",
    "pv sindhu", "saina nehwal", "pullela gopichand", "sania mirza",
)

BUSINESS = (
    "startup", "technology", "hitec city", "hitech city", "cyberabad",
    "microsoft", "google", "amazon", "facebook", "infosys", "tcs",
    "pharma", "biocon", "dr reddy", "aurobindo", "hetero",
)

CULTURE = (
    "festival", "bonalu", "bathukamma", "dussehra", "ugadi", "sankranti",
    "food", "biryani", "hyderabadi", "telugu language", "heritage",
)

LANGUAGE_TERMS = ("telugu", "tollywood", "telangana", "andhra pradesh")

# Scored terms: language identity and home-state geography
IDENTITY_TERMS = ("telugu", "tollywood")
REGIONAL_TERMS = ("telangana", "andhra pradesh", "hyderabad")

INDUSTRY_TERMS = ("tollywood",)
HUB_CITIES = ("hyderabad",)

CINEMA_TERMS = (
    "movie", "film", "actor", "actress", "trailer", "review", "box office",
    "tollywood", "cinema", "director", "producer", "release", "teaser", "first look",
)

POLITICS_TERMS = (
    "politics", "election", "cm", "minister", "party", "government", "assembly",
    "parliament", "policy", "cabinet", "congress", "brs", "tdp", "ysrcp",
)
