"""Static keyword, institution and tier tables used by the analyzers.

Everything here is read-only data built once at import time. Keywords are
stored lowercase; analyzers lowercase the text before matching.
"""

from types import MappingProxyType

from resume_scorer.schemas.analysis import DegreeLevel, SkillCategory

# ---------------------------------------------------------------------------
# Institutions: tier score -> names. Full names first, then common aliases.
# Short CJK aliases (清华, 北大) are only used for lookups, never for scanning.
# ---------------------------------------------------------------------------

INSTITUTION_TIERS = MappingProxyType({
    15: (
        "清华大学", "北京大学", "Tsinghua University", "Peking University",
        "Massachusetts Institute of Technology", "Stanford University",
        "Harvard University", "University of Oxford", "University of Cambridge",
        "California Institute of Technology", "Princeton University",
        "MIT", "Caltech", "清华", "北大",
    ),
    13: (
        "复旦大学", "上海交通大学", "浙江大学", "中国科学技术大学", "南京大学",
        "Fudan University", "Shanghai Jiao Tong University", "Zhejiang University",
        "Carnegie Mellon University", "University of California, Berkeley",
        "Yale University", "Columbia University", "University of Chicago",
        "Imperial College London", "ETH Zurich", "University of Pennsylvania",
        "CMU", "UC Berkeley", "复旦", "上交", "浙大", "中科大",
    ),
    11: (
        "中国人民大学", "武汉大学", "华中科技大学", "中山大学", "哈尔滨工业大学",
        "西安交通大学", "北京航空航天大学", "同济大学", "南开大学", "天津大学",
        "东南大学", "北京理工大学", "厦门大学", "Cornell University",
        "University of California, Los Angeles", "University of Toronto",
        "National University of Singapore", "University of Hong Kong",
        "University College London", "Johns Hopkins University", "UCLA", "NUS",
        "人大", "武大", "华科", "中大", "哈工大", "西交", "北航", "同济", "南开",
    ),
    9: (
        "北京邮电大学", "电子科技大学", "西安电子科技大学", "华东师范大学",
        "北京师范大学", "四川大学", "山东大学", "吉林大学", "大连理工大学",
        "华南理工大学", "中南大学", "重庆大学", "东北大学", "湖南大学",
        "University of Michigan", "Georgia Institute of Technology",
        "University of Washington", "University of Illinois Urbana-Champaign",
        "University of Texas at Austin", "New York University",
        "University of Edinburgh", "University of Manchester", "Georgia Tech",
        "北邮", "电子科大", "西电", "华东师大", "北师大", "川大", "山大",
    ),
    7: (
        "深圳大学", "南京邮电大学", "杭州电子科技大学", "上海大学", "苏州大学",
        "南京航空航天大学", "南京理工大学", "西北大学", "暨南大学", "郑州大学",
        "Arizona State University", "Purdue University", "Boston University",
        "Pennsylvania State University", "University of Sydney",
        "University of Melbourne", "Penn State",
    ),
    5: (
        "浙江工业大学", "广东工业大学", "北京工业大学", "江西财经大学", "河北大学",
        "山西大学", "广州大学", "宁波大学", "San Jose State University",
        "University of Central Florida", "Oregon State University",
        "Portland State University",
    ),
})

# Ordered pairs, best tier first; the first CJK/Latin full names are scannable.
RANKED_INSTITUTIONS = tuple(
    (name, score)
    for score in sorted(INSTITUTION_TIERS, reverse=True)
    for name in INSTITUTION_TIERS[score]
)

# Generic words removed before comparing institution names.
INSTITUTION_STOPWORDS = frozenset({
    "university", "college", "institute", "technology", "of", "the", "at", "and",
})
INSTITUTION_SUFFIXES_ZH = ("大学", "学院")

# Heuristic scores for institutions not in the tier table.
HEURISTIC_ELITE_SCORE = 6
HEURISTIC_GENERIC_SCORE = 3
HEURISTIC_SUB_BACHELOR_SCORE = 1
HEURISTIC_UNKNOWN_SCORE = 2

ELITE_MARKER_PATTERNS = (
    # Bare digit groups also occur in phone numbers; require a program/school word.
    r"(?<![\d-])(?:985|211)(?:\s*[/、,]?\s*(?:985|211))*\s*"
    r"(?:高校|工程|院校|大学|名校|重点|计划|(?i:universit(?:y|ies)|schools?|project))",
    r"双一流",
    r"一流大学",
    r"(?i)\bc9\b",
    r"常春藤",
    r"(?i)\bivy\s+league\b",
    r"(?i)\brussell\s+group\b",
    r"(?i)\b(?:qs|world)\s+top\s*\d+",
    r"(?i)\btop\s*(?:10|20|50)\s+(?:university|universities|school|schools)\b",
)

SUB_BACHELOR_MARKER_PATTERNS = (
    r"专科",
    r"大专",
    r"高职",
    r"职业技术学院",
    r"职业学院",
    r"(?i)\bassociate(?:'s)?\s+(?:degree|of)\b",
    r"(?i)\bcommunity\s+college\b",
    r"(?i)\bvocational\b",
)

UNIVERSITY_SHAPE_PATTERN = r"大学|学院|(?i:\b(?:university|college|institute)\b)"

# ---------------------------------------------------------------------------
# Degrees
# ---------------------------------------------------------------------------

DEGREE_KEYWORDS = MappingProxyType({
    DegreeLevel.PHD: (
        r"博士",
        r"(?i:\bph\.?\s?d\b)",
        r"(?i:\bd\.phil\b)",
        r"(?i:\bdoctor(?:ate|al)?\b)",
    ),
    DegreeLevel.MASTER: (
        r"硕士",
        r"研究生",
        r"(?i:\bmaster(?:'s|s)?\b)",
        r"(?i:\bm\.s\.?(?![a-z])|\bm\.?sc\b|\bm\.?eng\b|\bmba\b|\bm\.a\.)",
    ),
    DegreeLevel.BACHELOR: (
        r"本科",
        r"学士",
        r"(?i:\bbachelor(?:'s|s)?\b)",
        r"(?i:\bundergraduate\b)",
        r"(?i:\bb\.s\.?(?![a-z])|\bb\.?sc\b|\bb\.?eng\b|\bb\.a\.)",
    ),
    DegreeLevel.ASSOCIATE: (
        r"专科",
        r"大专",
        r"(?i:\bassociate(?:'s)?\s+(?:degree|of)\b)",
    ),
})

UNDERGRADUATE_LEVELS = (DegreeLevel.ASSOCIATE, DegreeLevel.BACHELOR)
GRADUATE_LEVELS = (DegreeLevel.MASTER, DegreeLevel.PHD)

GPA_LABEL_PATTERN = (
    r"(?:(?i:\bg\.?p\.?a\b|grade\s+point\s+average)|平均学分绩点|平均绩点|绩点|学分绩)"
    r"\s*[:：]?\s*(\d+(?:\.\d+)?)"
)

RELEVANT_MAJORS = (
    "computer science", "software engineering", "data science", "statistics",
    "mathematics", "electrical engineering", "electronic engineering",
    "information technology", "information systems", "automation",
    "mechanical engineering", "artificial intelligence", "finance", "economics",
    "industrial design", "visual communication",
    "计算机", "软件工程", "数据科学", "统计", "数学", "电子", "信息工程", "自动化",
    "通信", "人工智能", "机械", "金融", "经济", "设计学", "工业设计",
)

# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

SKILL_LEXICON = MappingProxyType({
    SkillCategory.PROGRAMMING: (
        "python", "java", "javascript", "typescript", "c++", "c#", "c", "golang",
        "kotlin", "swift", "php", "ruby", "html", "css", "react", "vue",
        "angular", "node.js", "django", "flask", "spring boot", "git", "linux",
        "docker", "kubernetes", "编程", "前端开发", "后端开发",
    ),
    SkillCategory.DESIGN: (
        "photoshop", "illustrator", "figma", "sketch", "axure", "adobe xd",
        "after effects", "premiere", "indesign", "coreldraw", "blender", "c4d",
        "ui design", "ux design", "ui", "ux", "平面设计", "交互设计", "视觉设计",
        "原型设计",
    ),
    SkillCategory.DATA: (
        "sql", "mysql", "postgresql", "mongodb", "pandas", "numpy", "tableau",
        "power bi", "spark", "hadoop", "machine learning",
        "deep learning", "tensorflow", "pytorch", "scikit-learn", "spss",
        "data analysis", "data mining", "data visualization", "etl",
        "数据分析", "数据挖掘", "机器学习", "深度学习", "大数据", "r语言",
    ),
    SkillCategory.BUSINESS: (
        "marketing", "sales", "accounting", "consulting", "project management",
        "product management", "market research", "business analysis", "crm",
        "erp", "negotiation", "市场营销", "销售", "财务", "会计", "咨询",
        "项目管理", "产品经理", "商业分析", "市场调研",
    ),
    SkillCategory.LANGUAGE: (
        "english", "japanese", "french", "german", "spanish", "korean",
        "cantonese", "ielts", "toefl", "cet-4", "cet-6", "英语", "日语", "法语",
        "德语", "韩语", "雅思", "托福",
    ),
    SkillCategory.OFFICE: (
        "microsoft office", "ms office", "ms word", "microsoft word", "excel",
        "powerpoint", "ppt", "ms outlook", "microsoft outlook", "visio", "wps", "google docs",
        "办公软件",
    ),
    SkillCategory.ENGINEERING: (
        "autocad", "solidworks", "matlab", "simulink", "plc", "pcb", "altium",
        "labview", "ansys", "catia", "verilog", "fpga", "stm32", "arduino",
        "raspberry pi", "embedded", "circuit design", "keil", "嵌入式",
        "单片机", "电路设计", "机械设计", "有限元",
    ),
})

# Latin keywords that are prefixes of everyday words ("excellent", "reaction")
# or of other keywords ("javascript"); these only match as whole words.
WORD_BOUNDARY_KEYWORDS = frozenset({
    "java", "excel", "react", "swift", "spark", "sales", "sketch", "premiere",
    "visio",
})
# Latin keywords with this many alphanumerics or fewer also match as whole words.
SHORT_KEYWORD_LENGTH = 3

# ---------------------------------------------------------------------------
# Experience and achievements
# ---------------------------------------------------------------------------

INTERNSHIP_PATTERN = r"实习|(?i:\bintern(?:ship)?s?\b)"
PROJECT_PATTERN = r"项目|(?i:\bprojects?\b)"

KNOWN_EMPLOYERS = (
    "腾讯", "阿里巴巴", "字节跳动", "百度", "华为", "京东", "美团", "网易", "小米",
    "google", "microsoft", "amazon", "apple", "meta", "ibm", "oracle", "intel",
    "deloitte", "pwc", "kpmg", "mckinsey",
)
EMPLOYER_PATTERN = (
    r"有限公司|公司|集团|"
    r"(?i:\b(?:inc|ltd|llc|corp|corporation|company|technologies|gmbh)\b\.?)"
)

MONTH_NAME_PATTERN = (
    r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
)
YEAR_RANGE_PATTERN = (
    r"(?:19|20)\d{2}(?:\s*[./年-]\s*\d{1,2}\s*月?)?"
    r"\s*(?:-|–|—|~|至|到|(?i:to))\s*"
    r"(?:(?:19|20)\d{2}(?:\s*[./年-]\s*\d{1,2}\s*月?)?|至今|今|(?i:present|now|current))"
)
DURATION_PATTERNS = (
    YEAR_RANGE_PATTERN,
    r"(?<!\d)\d{1,2}\s*(?:个月|年|周)",
    r"(?i:\b\d{1,2}\s*(?:months?|years?|weeks?)\b)",
    r"(?i:\b" + MONTH_NAME_PATTERN + r"\s+(?:19|20)\d{2}\s*(?:-|–|—|~|to)\s*)",
)
OUTCOME_PATTERN = (
    r"\d+(?:\.\d+)?\s*%|提升|提高|降低|减少|增长|节省|优化|"
    r"(?i:\b(?:increased|improved|reduced|decreased|saved|boosted|grew|achieved|resulted\s+in)\b)"
)

SCHOLARSHIP_PATTERN = r"奖学金|(?i:\b(?:scholarship|fellowship)s?\b)"
COMPETITION_PATTERN = (
    r"竞赛|比赛|大赛|挑战杯|(?i:\b(?:competition|contest|hackathon|olympiad)s?\b)"
)
CERTIFICATE_PATTERN = (
    r"证书|资格证|认证|英语[四六]级|"
    r"(?i:\bcertificates?\b|\bcertifications?\b|\bcertified\b|\bpmp\b|\bcpa\b|\bcfa\b|\bcet-?[46]\b)"
)
AWARD_PATTERN = r"获奖|奖项|[一二三]等奖|荣誉|(?i:\b(?:award|prize|honou?r)s?\b)"
LEADERSHIP_PATTERN = (
    r"主席|部长|会长|社长|队长|组长|班长|负责人|团支书|"
    r"(?i:\b(?:leader|leadership|president|captain|chair(?:man|person)?|head\s+of|led|founder|co-founder|team\s+lead)\b)"
)

# ---------------------------------------------------------------------------
# Structure and plausibility
# ---------------------------------------------------------------------------

SECTION_HEADINGS = MappingProxyType({
    "education": ("教育", "学历", "education"),
    "experience": ("经历", "工作经验", "experience", "employment"),
    "skills": ("技能", "skills", "competencies"),
    "projects": ("项目", "projects"),
    "contact": ("联系方式", "个人信息", "contact"),
    "awards": ("荣誉", "获奖", "awards", "honors", "achievements"),
    "summary": ("自我评价", "个人简介", "summary", "profile", "objective"),
})
MIN_SECTIONS_FOR_COMPLETE = 3

RESUME_KEYWORDS = (
    "姓名", "电话", "邮箱", "教育", "经历", "技能", "工作", "实习",
    "项目", "学校", "专业", "大学", "学院", "毕业", "求职", "应聘",
    "name", "phone", "email", "education", "experience", "skills",
    "work", "university", "college", "graduate", "internship", "project",
)

RESUME_TITLE_LINES = frozenset({"resume", "résumé", "curriculum vitae", "cv", "简历", "个人简历"})
