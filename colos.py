"""Static reference data for Cloudflare edge locations (colos).

Each colo carries its 3-letter code, the place name from the Cloudflare status
page, and the Durable Objects location hint measured closest to it. Colos with
no usable latency measurements have no hint.

The member block below is written by codegen.py; regenerate rather than
editing it by hand.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum, unique

from location_hints import LocationHint


@unique
class Colo(Enum):
    """One edge location.  Value is ``(code, display_name, location_hint)``."""

    # BEGIN GENERATED COLOS
    AAE = ("AAE", "Annaba, Algeria", LocationHint.AFR)
    ABJ = ("ABJ", "Abidjan, Côte d'Ivoire", LocationHint.AFR)
    ABQ = ("ABQ", "Albuquerque, NM, United States", LocationHint.WNAM)
    ACC = ("ACC", "Accra, Ghana", LocationHint.AFR)
    ADB = ("ADB", "Izmir, Turkey", LocationHint.EEUR)
    ADD = ("ADD", "Addis Ababa, Ethiopia", LocationHint.AFR)
    ADL = ("ADL", "Adelaide, SA, Australia", LocationHint.OC)
    AKL = ("AKL", "Auckland, New Zealand", LocationHint.OC)
    ALA = ("ALA", "Almaty, Kazakhstan", LocationHint.EEUR)
    ALG = ("ALG", "Algiers, Algeria", LocationHint.AFR)
    AMD = ("AMD", "Ahmedabad, India", LocationHint.APAC)
    AMM = ("AMM", "Amman, Jordan", LocationHint.ME)
    AMS = ("AMS", "Amsterdam, Netherlands", LocationHint.WEUR)
    ANC = ("ANC", "Anchorage, AK, United States", LocationHint.WNAM)
    ARI = ("ARI", "Arica, Chile", LocationHint.SAM)
    ARN = ("ARN", "Stockholm, Sweden", LocationHint.EEUR)
    ASU = ("ASU", "Asunción, Paraguay", LocationHint.SAM)
    ATH = ("ATH", "Athens, Greece", LocationHint.EEUR)
    ATL = ("ATL", "Atlanta, GA, United States", LocationHint.ENAM)
    AUS = ("AUS", "Austin, TX, United States", LocationHint.ENAM)
    BAH = ("BAH", "Manama, Bahrain", LocationHint.ME)
    BAQ = ("BAQ", "Barranquilla, Colombia", LocationHint.SAM)
    BBI = ("BBI", "Bhubaneswar, India", LocationHint.APAC)
    BCN = ("BCN", "Barcelona, Spain", LocationHint.WEUR)
    BEG = ("BEG", "Belgrade, Serbia", LocationHint.EEUR)
    BEL = ("BEL", "Belém, Brazil", LocationHint.SAM)
    BEY = ("BEY", "Beirut, Lebanon", LocationHint.ME)
    BGI = ("BGI", "Bridgetown, Barbados", LocationHint.ENAM)
    BGR = ("BGR", "Bangor, ME, United States", LocationHint.ENAM)
    BGW = ("BGW", "Baghdad, Iraq", LocationHint.ME)
    BKK = ("BKK", "Bangkok, Thailand", LocationHint.APAC)
    BLR = ("BLR", "Bangalore, India", LocationHint.APAC)
    BNA = ("BNA", "Nashville, TN, United States", LocationHint.ENAM)
    BNE = ("BNE", "Brisbane, QLD, Australia", LocationHint.OC)
    BNU = ("BNU", "Blumenau, Brazil", LocationHint.SAM)
    BOD = ("BOD", "Bordeaux, France", LocationHint.WEUR)
    BOG = ("BOG", "Bogotá, Colombia", LocationHint.SAM)
    BOM = ("BOM", "Mumbai, India", LocationHint.APAC)
    BOS = ("BOS", "Boston, MA, United States", LocationHint.ENAM)
    BRU = ("BRU", "Brussels, Belgium", LocationHint.WEUR)
    BSB = ("BSB", "Brasília, Brazil", LocationHint.SAM)
    BSR = ("BSR", "Basra, Iraq", LocationHint.ME)
    BTS = ("BTS", "Bratislava, Slovakia", LocationHint.EEUR)
    BUD = ("BUD", "Budapest, Hungary", LocationHint.EEUR)
    BUF = ("BUF", "Buffalo, NY, United States", LocationHint.ENAM)
    BWN = ("BWN", "Bandar Seri Begawan, Brunei", LocationHint.APAC)
    CAI = ("CAI", "Cairo, Egypt", LocationHint.ME)
    CAN = ("CAN", "Guangzhou, China", None)
    CBR = ("CBR", "Canberra, ACT, Australia", LocationHint.OC)
    CCU = ("CCU", "Kolkata, India", LocationHint.APAC)
    CDG = ("CDG", "Paris, France", LocationHint.WEUR)
    CEB = ("CEB", "Cebu, Philippines", LocationHint.APAC)
    CFC = ("CFC", "Caçador, Brazil", LocationHint.SAM)
    CGB = ("CGB", "Cuiabá, Brazil", LocationHint.SAM)
    CGD = ("CGD", "Changde, China", None)
    CGK = ("CGK", "Jakarta, Indonesia", LocationHint.APAC)
    CGO = ("CGO", "Zhengzhou, China", None)
    CGP = ("CGP", "Chittagong, Bangladesh", LocationHint.APAC)
    CHC = ("CHC", "Christchurch, New Zealand", LocationHint.OC)
    CHS = ("CHS", "Charleston, SC, United States", LocationHint.ENAM)
    CKG = ("CKG", "Chongqing, China", None)
    CLE = ("CLE", "Cleveland, OH, United States", LocationHint.ENAM)
    CLO = ("CLO", "Cali, Colombia", LocationHint.SAM)
    CLT = ("CLT", "Charlotte, NC, United States", LocationHint.ENAM)
    CMB = ("CMB", "Colombo, Sri Lanka", LocationHint.APAC)
    CMH = ("CMH", "Columbus, OH, United States", LocationHint.ENAM)
    CMN = ("CMN", "Casablanca, Morocco", LocationHint.WEUR)
    CNF = ("CNF", "Belo Horizonte, Brazil", LocationHint.SAM)
    CNX = ("CNX", "Chiang Mai, Thailand", LocationHint.APAC)
    COK = ("COK", "Kochi, India", LocationHint.APAC)
    COR = ("COR", "Córdoba, Argentina", LocationHint.SAM)
    CPH = ("CPH", "Copenhagen, Denmark", LocationHint.WEUR)
    CPT = ("CPT", "Cape Town, South Africa", LocationHint.AFR)
    CRK = ("CRK", "Tarlac City, Philippines", LocationHint.APAC)
    CSX = ("CSX", "Changsha, China", None)
    CTU = ("CTU", "Chengdu, China", None)
    CUR = ("CUR", "Willemstad, Curaçao", LocationHint.ENAM)
    CWB = ("CWB", "Curitiba, Brazil", LocationHint.SAM)
    CZL = ("CZL", "Constantine, Algeria", LocationHint.AFR)
    CZX = ("CZX", "Changzhou, China", None)
    DAC = ("DAC", "Dhaka, Bangladesh", LocationHint.APAC)
    DAD = ("DAD", "Da Nang, Vietnam", LocationHint.APAC)
    DAR = ("DAR", "Dar es Salaam, Tanzania", LocationHint.AFR)
    DEL = ("DEL", "New Delhi, India", LocationHint.APAC)
    DEN = ("DEN", "Denver, CO, United States", LocationHint.WNAM)
    DFW = ("DFW", "Dallas, TX, United States", LocationHint.ENAM)
    DKR = ("DKR", "Dakar, Senegal", LocationHint.AFR)
    DLA = ("DLA", "Douala, Cameroon", LocationHint.AFR)
    DLC = ("DLC", "Dalian, China", None)
    DME = ("DME", "Moscow, Russia", LocationHint.EEUR)
    DMM = ("DMM", "Dammam, Saudi Arabia", LocationHint.ME)
    DOH = ("DOH", "Doha, Qatar", LocationHint.ME)
    DPS = ("DPS", "Denpasar, Indonesia", LocationHint.APAC)
    DTW = ("DTW", "Detroit, MI, United States", LocationHint.ENAM)
    DUB = ("DUB", "Dublin, Ireland", LocationHint.WEUR)
    DUR = ("DUR", "Durban, South Africa", LocationHint.AFR)
    DUS = ("DUS", "Düsseldorf, Germany", LocationHint.WEUR)
    DXB = ("DXB", "Dubai, United Arab Emirates", LocationHint.ME)
    EBB = ("EBB", "Kampala, Uganda", LocationHint.AFR)
    EBL = ("EBL", "Erbil, Iraq", LocationHint.ME)
    EDI = ("EDI", "Edinburgh, United Kingdom", LocationHint.WEUR)
    EVN = ("EVN", "Yerevan, Armenia", LocationHint.EEUR)
    EWR = ("EWR", "Newark, NJ, United States", LocationHint.ENAM)
    EZE = ("EZE", "Buenos Aires, Argentina", LocationHint.SAM)
    FCO = ("FCO", "Rome, Italy", LocationHint.WEUR)
    FIH = ("FIH", "Kinshasa, DR Congo", LocationHint.AFR)
    FLN = ("FLN", "Florianópolis, Brazil", LocationHint.SAM)
    FOC = ("FOC", "Fuzhou, China", None)
    FOR = ("FOR", "Fortaleza, Brazil", LocationHint.SAM)
    FRA = ("FRA", "Frankfurt, Germany", LocationHint.WEUR)
    FRU = ("FRU", "Bishkek, Kyrgyzstan", LocationHint.EEUR)
    FSD = ("FSD", "Sioux Falls, SD, United States", LocationHint.ENAM)
    FUK = ("FUK", "Fukuoka, Japan", LocationHint.APAC)
    GBE = ("GBE", "Gaborone, Botswana", LocationHint.AFR)
    GDL = ("GDL", "Guadalajara, Mexico", LocationHint.WNAM)
    GEO = ("GEO", "Georgetown, Guyana", LocationHint.SAM)
    GIG = ("GIG", "Rio de Janeiro, Brazil", LocationHint.SAM)
    GND = ("GND", "St. George's, Grenada", LocationHint.ENAM)
    GOT = ("GOT", "Gothenburg, Sweden", LocationHint.WEUR)
    GRU = ("GRU", "São Paulo, Brazil", LocationHint.SAM)
    GUA = ("GUA", "Guatemala City, Guatemala", LocationHint.ENAM)
    GUM = ("GUM", "Hagatna, Guam", LocationHint.APAC)
    GVA = ("GVA", "Geneva, Switzerland", LocationHint.WEUR)
    GYD = ("GYD", "Baku, Azerbaijan", LocationHint.EEUR)
    GYE = ("GYE", "Guayaquil, Ecuador", LocationHint.SAM)
    GYN = ("GYN", "Goiânia, Brazil", LocationHint.SAM)
    HAK = ("HAK", "Haikou, China", None)
    HAM = ("HAM", "Hamburg, Germany", LocationHint.WEUR)
    HAN = ("HAN", "Hanoi, Vietnam", LocationHint.APAC)
    HBA = ("HBA", "Hobart, TAS, Australia", LocationHint.OC)
    HEL = ("HEL", "Helsinki, Finland", LocationHint.EEUR)
    HFA = ("HFA", "Haifa, Israel", LocationHint.ME)
    HFE = ("HFE", "Hefei, China", None)
    HGH = ("HGH", "Hangzhou, China", None)
    HKG = ("HKG", "Hong Kong", LocationHint.APAC)
    HNL = ("HNL", "Honolulu, HI, United States", LocationHint.WNAM)
    HRE = ("HRE", "Harare, Zimbabwe", LocationHint.AFR)
    HYD = ("HYD", "Hyderabad, India", LocationHint.APAC)
    HYN = ("HYN", "Taizhou, China", None)
    IAD = ("IAD", "Ashburn, VA, United States", LocationHint.ENAM)
    IAH = ("IAH", "Houston, TX, United States", LocationHint.ENAM)
    ICN = ("ICN", "Seoul, South Korea", LocationHint.APAC)
    IND = ("IND", "Indianapolis, IN, United States", LocationHint.ENAM)
    ISB = ("ISB", "Islamabad, Pakistan", LocationHint.APAC)
    IST = ("IST", "Istanbul, Turkey", LocationHint.EEUR)
    ISU = ("ISU", "Sulaymaniyah, Iraq", LocationHint.ME)
    ITJ = ("ITJ", "Itajaí, Brazil", LocationHint.SAM)
    IXC = ("IXC", "Chandigarh, India", LocationHint.APAC)
    JAX = ("JAX", "Jacksonville, FL, United States", LocationHint.ENAM)
    JDO = ("JDO", "Juazeiro do Norte, Brazil", LocationHint.SAM)
    JED = ("JED", "Jeddah, Saudi Arabia", LocationHint.ME)
    JHB = ("JHB", "Johor Bahru, Malaysia", LocationHint.APAC)
    JIB = ("JIB", "Djibouti, Djibouti", LocationHint.AFR)
    JNB = ("JNB", "Johannesburg, South Africa", LocationHint.AFR)
    JOG = ("JOG", "Yogyakarta, Indonesia", LocationHint.APAC)
    JOI = ("JOI", "Joinville, Brazil", LocationHint.SAM)
    JSR = ("JSR", "Jashore, Bangladesh", None)
    KBP = ("KBP", "Kyiv, Ukraine", LocationHint.EEUR)
    KCH = ("KCH", "Kuching, Malaysia", LocationHint.APAC)
    KEF = ("KEF", "Reykjavík, Iceland", LocationHint.WEUR)
    KGL = ("KGL", "Kigali, Rwanda", LocationHint.AFR)
    KHH = ("KHH", "Kaohsiung City, Taiwan", LocationHint.APAC)
    KHI = ("KHI", "Karachi, Pakistan", LocationHint.APAC)
    KHN = ("KHN", "Nanchang, China", None)
    KIN = ("KIN", "Kingston, Jamaica", LocationHint.ENAM)
    KIV = ("KIV", "Chișinău, Moldova", LocationHint.EEUR)
    KIX = ("KIX", "Osaka, Japan", LocationHint.APAC)
    KJA = ("KJA", "Krasnoyarsk, Russia", LocationHint.EEUR)
    KMG = ("KMG", "Kunming, China", None)
    KNU = ("KNU", "Kanpur, India", LocationHint.APAC)
    KTM = ("KTM", "Kathmandu, Nepal", LocationHint.APAC)
    KUL = ("KUL", "Kuala Lumpur, Malaysia", LocationHint.APAC)
    KWE = ("KWE", "Guiyang, China", None)
    KWI = ("KWI", "Kuwait City, Kuwait", LocationHint.ME)
    LAD = ("LAD", "Luanda, Angola", LocationHint.AFR)
    LAS = ("LAS", "Las Vegas, NV, United States", LocationHint.WNAM)
    LAX = ("LAX", "Los Angeles, CA, United States", LocationHint.WNAM)
    LCA = ("LCA", "Nicosia, Cyprus", LocationHint.EEUR)
    LED = ("LED", "Saint Petersburg, Russia", LocationHint.EEUR)
    LHE = ("LHE", "Lahore, Pakistan", LocationHint.APAC)
    LHR = ("LHR", "London, United Kingdom", LocationHint.WEUR)
    LHW = ("LHW", "Lanzhou, China", None)
    LIM = ("LIM", "Lima, Peru", LocationHint.SAM)
    LIS = ("LIS", "Lisbon, Portugal", LocationHint.WEUR)
    LLK = ("LLK", "Astara, Azerbaijan", None)
    LLW = ("LLW", "Lilongwe, Malawi", LocationHint.AFR)
    LOS = ("LOS", "Lagos, Nigeria", LocationHint.AFR)
    LPB = ("LPB", "La Paz, Bolivia", LocationHint.SAM)
    LUN = ("LUN", "Lusaka, Zambia", LocationHint.AFR)
    LUX = ("LUX", "Luxembourg City, Luxembourg", LocationHint.WEUR)
    LYS = ("LYS", "Lyon, France", LocationHint.WEUR)
    MAA = ("MAA", "Chennai, India", LocationHint.APAC)
    MAD = ("MAD", "Madrid, Spain", LocationHint.WEUR)
    MAN = ("MAN", "Manchester, United Kingdom", LocationHint.WEUR)
    MAO = ("MAO", "Manaus, Brazil", LocationHint.SAM)
    MBA = ("MBA", "Mombasa, Kenya", LocationHint.AFR)
    MCI = ("MCI", "Kansas City, MO, United States", LocationHint.ENAM)
    MCT = ("MCT", "Muscat, Oman", LocationHint.ME)
    MDE = ("MDE", "Medellín, Colombia", LocationHint.SAM)
    MDL = ("MDL", "Mandalay, Myanmar", LocationHint.APAC)
    MEL = ("MEL", "Melbourne, VIC, Australia", LocationHint.OC)
    MEM = ("MEM", "Memphis, TN, United States", LocationHint.ENAM)
    MEX = ("MEX", "Mexico City, Mexico", LocationHint.ENAM)
    MFE = ("MFE", "McAllen, TX, United States", LocationHint.ENAM)
    MFM = ("MFM", "Macau", LocationHint.APAC)
    MIA = ("MIA", "Miami, FL, United States", LocationHint.ENAM)
    MLE = ("MLE", "Malé, Maldives", LocationHint.APAC)
    MNL = ("MNL", "Manila, Philippines", LocationHint.APAC)
    MPM = ("MPM", "Maputo, Mozambique", LocationHint.AFR)
    MRS = ("MRS", "Marseille, France", LocationHint.WEUR)
    MRU = ("MRU", "Port Louis, Mauritius", LocationHint.AFR)
    MSP = ("MSP", "Minneapolis, MN, United States", LocationHint.ENAM)
    MSQ = ("MSQ", "Minsk, Belarus", LocationHint.EEUR)
    MSY = ("MSY", "New Orleans, LA, United States", LocationHint.ENAM)
    MUC = ("MUC", "Munich, Germany", LocationHint.WEUR)
    MVD = ("MVD", "Montevideo, Uruguay", LocationHint.SAM)
    MXP = ("MXP", "Milan, Italy", LocationHint.WEUR)
    NAG = ("NAG", "Nagpur, India", LocationHint.APAC)
    NBO = ("NBO", "Nairobi, Kenya", LocationHint.AFR)
    NJF = ("NJF", "Najaf, Iraq", LocationHint.ME)
    NNG = ("NNG", "Nanning, China", None)
    NOU = ("NOU", "Noumea, New Caledonia", LocationHint.OC)
    NQN = ("NQN", "Neuquén, Argentina", LocationHint.SAM)
    NQZ = ("NQZ", "Astana, Kazakhstan", LocationHint.EEUR)
    NRT = ("NRT", "Tokyo, Japan", LocationHint.APAC)
    OKA = ("OKA", "Naha, Japan", LocationHint.APAC)
    OKC = ("OKC", "Oklahoma City, OK, United States", LocationHint.ENAM)
    OMA = ("OMA", "Omaha, NE, United States", LocationHint.ENAM)
    ORD = ("ORD", "Chicago, IL, United States", LocationHint.ENAM)
    ORF = ("ORF", "Norfolk, VA, United States", LocationHint.ENAM)
    ORK = ("ORK", "Cork, Ireland", LocationHint.WEUR)
    ORN = ("ORN", "Oran, Algeria", LocationHint.AFR)
    OSL = ("OSL", "Oslo, Norway", LocationHint.WEUR)
    OTP = ("OTP", "Bucharest, Romania", LocationHint.EEUR)
    OUA = ("OUA", "Ouagadougou, Burkina Faso", LocationHint.AFR)
    PAP = ("PAP", "Port-au-Prince, Haiti", LocationHint.ENAM)
    PAT = ("PAT", "Patna, India", LocationHint.APAC)
    PBH = ("PBH", "Thimphu, Bhutan", LocationHint.APAC)
    PBM = ("PBM", "Paramaribo, Suriname", LocationHint.SAM)
    PDX = ("PDX", "Portland, OR, United States", LocationHint.WNAM)
    PEK = ("PEK", "Beijing, China", None)
    PER = ("PER", "Perth, WA, Australia", LocationHint.OC)
    PHL = ("PHL", "Philadelphia, PA, United States", LocationHint.ENAM)
    PHX = ("PHX", "Phoenix, AZ, United States", LocationHint.WNAM)
    PIT = ("PIT", "Pittsburgh, PA, United States", LocationHint.ENAM)
    PMO = ("PMO", "Palermo, Italy", LocationHint.WEUR)
    PMW = ("PMW", "Palmas, Brazil", LocationHint.SAM)
    PNH = ("PNH", "Phnom Penh, Cambodia", LocationHint.APAC)
    POA = ("POA", "Porto Alegre, Brazil", LocationHint.SAM)
    POS = ("POS", "Port of Spain, Trinidad and Tobago", LocationHint.ENAM)
    PPT = ("PPT", "Tahiti, French Polynesia", LocationHint.OC)
    PRG = ("PRG", "Prague, Czech Republic", LocationHint.EEUR)
    PTY = ("PTY", "Panama City, Panama", LocationHint.ENAM)
    PVG = ("PVG", "Shanghai, China", None)
    QRO = ("QRO", "Queretaro, Mexico", LocationHint.ENAM)
    QWJ = ("QWJ", "Americana, Brazil", LocationHint.SAM)
    RAO = ("RAO", "Ribeirao Preto, Brazil", LocationHint.SAM)
    RDU = ("RDU", "Durham, NC, United States", LocationHint.ENAM)
    REC = ("REC", "Recife, Brazil", LocationHint.SAM)
    RGN = ("RGN", "Yangon, Myanmar", LocationHint.APAC)
    RIC = ("RIC", "Richmond, VA, United States", LocationHint.ENAM)
    RIX = ("RIX", "Riga, Latvia", LocationHint.EEUR)
    RUH = ("RUH", "Riyadh, Saudi Arabia", LocationHint.ME)
    RUN = ("RUN", "Saint-Denis, Réunion", LocationHint.AFR)
    SAN = ("SAN", "San Diego, CA, United States", LocationHint.WNAM)
    SAP = ("SAP", "San Pedro Sula, Honduras", LocationHint.ENAM)
    SAT = ("SAT", "San Antonio, TX, United States", LocationHint.ENAM)
    SCL = ("SCL", "Santiago, Chile", LocationHint.SAM)
    SDQ = ("SDQ", "Santo Domingo, Dominican Republic", LocationHint.ENAM)
    SEA = ("SEA", "Seattle, WA, United States", LocationHint.WNAM)
    SFO = ("SFO", "San Francisco, CA, United States", LocationHint.WNAM)
    SGN = ("SGN", "Ho Chi Minh City, Vietnam", LocationHint.APAC)
    SHA = ("SHA", "Shanghai, China", None)
    SHE = ("SHE", "Shenyang, China", None)
    SIN = ("SIN", "Singapore, Singapore", LocationHint.APAC)
    SJC = ("SJC", "San Jose, CA, United States", LocationHint.WNAM)
    SJK = ("SJK", "São José dos Campos, Brazil", LocationHint.SAM)
    SJO = ("SJO", "San José, Costa Rica", LocationHint.ENAM)
    SJP = ("SJP", "São José do Rio Preto, Brazil", LocationHint.SAM)
    SJU = ("SJU", "San Juan, Puerto Rico", LocationHint.ENAM)
    SJW = ("SJW", "Shijiazhuang, China", None)
    SKG = ("SKG", "Thessaloniki, Greece", LocationHint.EEUR)
    SKP = ("SKP", "Skopje, North Macedonia", LocationHint.EEUR)
    SLC = ("SLC", "Salt Lake City, UT, United States", LocationHint.WNAM)
    SMF = ("SMF", "Sacramento, CA, United States", LocationHint.WNAM)
    SOD = ("SOD", "Sorocaba, Brazil", LocationHint.SAM)
    SOF = ("SOF", "Sofia, Bulgaria", LocationHint.EEUR)
    SSA = ("SSA", "Salvador, Brazil", LocationHint.SAM)
    STL = ("STL", "St. Louis, MO, United States", LocationHint.ENAM)
    STR = ("STR", "Stuttgart, Germany", LocationHint.WEUR)
    SUV = ("SUV", "Suva, Fiji", LocationHint.OC)
    SVX = ("SVX", "Yekaterinburg, Russia", LocationHint.EEUR)
    SYD = ("SYD", "Sydney, NSW, Australia", LocationHint.OC)
    SZX = ("SZX", "Shenzhen, China", None)
    TAO = ("TAO", "Qingdao, China", None)
    TAS = ("TAS", "Tashkent, Uzbekistan", LocationHint.EEUR)
    TBS = ("TBS", "Tbilisi, Georgia", LocationHint.EEUR)
    TGU = ("TGU", "Tegucigalpa, Honduras", LocationHint.ENAM)
    TIA = ("TIA", "Tirana, Albania", LocationHint.EEUR)
    TLH = ("TLH", "Tallahassee, FL, United States", LocationHint.ENAM)
    TLL = ("TLL", "Tallinn, Estonia", LocationHint.EEUR)
    TLV = ("TLV", "Tel Aviv, Israel", LocationHint.ME)
    TNA = ("TNA", "Jinan, China", None)
    TNR = ("TNR", "Antananarivo, Madagascar", LocationHint.AFR)
    TPA = ("TPA", "Tampa, FL, United States", LocationHint.ENAM)
    TPE = ("TPE", "Taipei, Taiwan", LocationHint.APAC)
    TSN = ("TSN", "Tianjin, China", None)
    TUN = ("TUN", "Tunis, Tunisia", LocationHint.AFR)
    TXL = ("TXL", "Berlin, Germany", LocationHint.WEUR)
    TYN = ("TYN", "Taiyuan, China", None)
    UDI = ("UDI", "Uberlândia, Brazil", LocationHint.SAM)
    UIO = ("UIO", "Quito, Ecuador", LocationHint.SAM)
    ULN = ("ULN", "Ulaanbaatar, Mongolia", LocationHint.APAC)
    URT = ("URT", "Surat Thani, Thailand", LocationHint.APAC)
    VCP = ("VCP", "Campinas, Brazil", LocationHint.SAM)
    VIE = ("VIE", "Vienna, Austria", LocationHint.EEUR)
    VNO = ("VNO", "Vilnius, Lithuania", LocationHint.EEUR)
    VTE = ("VTE", "Vientiane, Laos", LocationHint.APAC)
    WAW = ("WAW", "Warsaw, Poland", LocationHint.EEUR)
    WDH = ("WDH", "Windhoek, Namibia", LocationHint.AFR)
    WUH = ("WUH", "Wuhan, China", None)
    WUX = ("WUX", "Wuxi, China", None)
    XAP = ("XAP", "Chapeco, Brazil", LocationHint.SAM)
    XIY = ("XIY", "Xi'an, China", None)
    XNH = ("XNH", "Nasiriyah, Iraq", LocationHint.ME)
    XNN = ("XNN", "Xining, China", None)
    YHZ = ("YHZ", "Halifax, NS, Canada", LocationHint.ENAM)
    YOW = ("YOW", "Ottawa, ON, Canada", LocationHint.ENAM)
    YTY = ("YTY", "Yangzhou, China", None)
    YUL = ("YUL", "Montréal, QC, Canada", LocationHint.ENAM)
    YVR = ("YVR", "Vancouver, BC, Canada", LocationHint.WNAM)
    YWG = ("YWG", "Winnipeg, MB, Canada", LocationHint.ENAM)
    YXE = ("YXE", "Saskatoon, SK, Canada", LocationHint.WNAM)
    YYC = ("YYC", "Calgary, AB, Canada", LocationHint.WNAM)
    YYZ = ("YYZ", "Toronto, ON, Canada", LocationHint.ENAM)
    ZAG = ("ZAG", "Zagreb, Croatia", LocationHint.EEUR)
    ZDM = ("ZDM", "Ramallah, Palestine", LocationHint.ME)
    ZGN = ("ZGN", "Zhongshan, China", None)
    ZRH = ("ZRH", "Zürich, Switzerland", LocationHint.WEUR)
    # END GENERATED COLOS

    def __init__(self, code: str, display_name: str, location_hint: LocationHint | None) -> None:
        self.code = code
        self.display_name = display_name
        self.location_hint = location_hint

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_code(cls, code: str) -> Colo | None:
        """Look up a colo by its uppercase code (case-sensitive, exact match)."""
        return _BY_CODE.get(code)


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------

ALL: tuple[Colo, ...] = tuple(Colo)
Colo.ALL = ALL

_BY_CODE: dict[str, Colo] = {c.code: c for c in ALL}
_BY_HINT: dict[LocationHint, tuple[Colo, ...]] = {
    hint: tuple(c for c in ALL if c.location_hint is hint) for hint in LocationHint
}


def colos_for_hint(hint: LocationHint) -> tuple[Colo, ...]:
    """All colos assigned to ``hint``, in declaration order."""
    return _BY_HINT[hint]


# ---------------------------------------------------------------------------
# Derived constants, computed once at import time
# ---------------------------------------------------------------------------

HINT_COLO_COUNTS: dict[LocationHint, int] = dict(
    Counter(c.location_hint for c in ALL if c.location_hint is not None)
)
UNCLASSIFIED_COLOS: tuple[Colo, ...] = tuple(c for c in ALL if c.location_hint is None)
