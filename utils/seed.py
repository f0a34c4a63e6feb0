"""
Seed Content - Initial profile, narrative sections and skills
loaded into the ContentStore when the application starts.
"""

SEED_BASIC_INFO = {
    'name': '유현지',
    'education': 'OO대학교',
    'major': '호텔조리/외식경영',
    'experience': '1년차 / 신입',
    'photo': '/static/profile.jpg',
}

SEED_SECTIONS = [
    {
        'id': 'dev-story',
        'title': '나의 개발 스토리',
        'content': (
            '"망상에서 시작된 질문, 사용자 경험의 해답이 되다."\n\n'
            '저는 평소 다양한 콘텐츠를 접하며 "이 서비스는 왜 이런 구조를 선택했을까?", '
            '"나라면 이 인터페이스를 어떻게 바꿀까?"를 끊임없이 상상하고 망상하는 것을 즐겼습니다. '
            '혼자만의 상상으로 그치던 생각들은 제가 디자이너가 되어야겠다고 결심한 가장 강력한 동기였습니다.\n\n'
            '지난 1년은 그 상상들을 현실로 구현하기 위해 디자인 원칙을 세우고, 코딩을 배우며, '
            'AI 툴로 아이디어를 시각화하는 법을 익히는 시간이었습니다. '
            '이제 저의 즐거운 망상을 실제 사용자가 감동하는 정교한 UI/UX로 증명해 보이고 싶습니다.'
        ),
        'show_in_home': True,
    },
    {
        'id': 'philosophy',
        'title': '개발 철학',
        'content': (
            "디자인 트렌드는 매 순간 변하지만, 본질은 사용자에게 닿는 '경험'에 있다고 믿습니다. "
            '1년의 집중적인 과정을 통해 UI/UX의 기초부터 웹 퍼블리싱까지 웹 디자인의 전 과정을 섭렵했습니다. '
            '특히 AI를 디자인 워크플로우에 적극 도입하여 리서치와 에셋 제작 시간을 단축하고, '
            '그만큼 사용자의 고민에 더 깊이 몰입하는 효율적인 크리에이터입니다.'
        ),
        'show_in_home': True,
    },
    {
        'id': 'personal',
        'title': '개인적인 이야기',
        'content': (
            '애니메이션 보기를 좋아하고, 귀여운 것을 수집하기 좋아합니다. '
            '어쩌면 제가 디자인을 사랑하게 된 이유일 수도 있겠습니다.'
        ),
        'show_in_home': False,
    },
]

SEED_SKILLS = [
    {'id': 1, 'icon': 'Figma', 'name': 'Figma', 'level': 90, 'category': 'Design'},
    {'id': 2, 'icon': 'PenTool', 'name': 'Illustrator', 'level': 85, 'category': 'Design'},
    {'id': 3, 'icon': 'ImageIcon', 'name': 'Photoshop', 'level': 80, 'category': 'Design'},
    {'id': 4, 'icon': 'Layout', 'name': 'Adobe XD', 'level': 75, 'category': 'Design'},
    {'id': 5, 'icon': 'Globe', 'name': 'HTML/CSS', 'level': 85, 'category': 'Frontend'},
    {'id': 6, 'icon': 'FileCode', 'name': 'JavaScript', 'level': 70, 'category': 'Frontend'},
    {'id': 7, 'icon': 'Code', 'name': 'React', 'level': 65, 'category': 'Frontend'},
    {'id': 8, 'icon': 'GitBranch', 'name': 'Git', 'level': 60, 'category': 'Frontend'},
]

# Sample records for the 'sql' gateway backend (see migrations/seed_projects.py)
SAMPLE_PROJECTS = [
    {
        'title': '카페 리브랜딩 웹사이트',
        'description': '동네 카페의 브랜드 아이덴티티와 반응형 웹사이트를 새로 디자인했습니다.',
        'thumbnail_url': '/static/projects/cafe.png',
        'detail_url': 'https://www.figma.com/',
        'tech_stack': ['Figma', 'HTML/CSS'],
        'is_published': True,
        'sort_order': 1,
    },
    {
        'title': '레시피 기록 앱 UI',
        'description': '요리 경험을 살려 레시피를 단계별로 기록하는 모바일 앱 UI를 설계했습니다.',
        'thumbnail_url': '/static/projects/recipe.png',
        'detail_url': 'https://www.figma.com/',
        'tech_stack': ['Figma', 'Illustrator'],
        'is_published': True,
        'sort_order': 2,
    },
    {
        'title': '포트폴리오 사이트',
        'description': '지금 보고 계신 포트폴리오 사이트입니다.',
        'thumbnail_url': '/static/projects/portfolio.png',
        'detail_url': 'https://github.com/',
        'tech_stack': ['React', 'JavaScript', 'Git'],
        'is_published': True,
        'sort_order': 3,
    },
]
