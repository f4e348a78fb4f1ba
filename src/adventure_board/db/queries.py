# src/adventure_board/db/queries.py
#
# Read-only statements against the bot's schema. Parameters use the
# aiomysql/PyMySQL %s paramstyle.

PING = "SELECT 1"

SELECT_ACTIVE_ADVENTURES = """
SELECT
    a.id AS adventure_id,
    a.chat_id,
    a.status,
    a.created_at,
    COUNT(ap.character_id) AS participant_count
FROM adventures a
LEFT JOIN adventure_participants ap ON a.id = ap.adventure_id
WHERE a.status = 'active'
GROUP BY a.id, a.chat_id, a.status, a.created_at
ORDER BY a.created_at DESC
"""

SELECT_PARTY_MEMBERS = """
SELECT
    c.id AS character_id,
    c.name,
    c.level,
    c.experience,
    c.user_id,
    u.first_name,
    u.username,
    c.hit_points,
    c.max_hit_points,
    c.strength,
    c.dexterity,
    c.constitution,
    c.intelligence,
    c.wisdom,
    c.charisma,
    c.money,
    r.name AS race_name,
    o.name AS origin_name,
    cl.name AS class_name,
    cl.hit_die,
    cl.is_spellcaster,
    l.proficiency_bonus,
    ap.joined_at
FROM adventure_participants ap
INNER JOIN characters c ON ap.character_id = c.id
LEFT JOIN users u ON c.user_id = u.id
LEFT JOIN races r ON c.race_id = r.id
LEFT JOIN origins o ON c.origin_id = o.id
LEFT JOIN classes cl ON c.class_id = cl.id
LEFT JOIN levels l ON c.level = l.level
WHERE ap.adventure_id = %s
ORDER BY c.name
"""

SELECT_USER_ACTIVE_CHARACTER = """
SELECT
    c.id AS character_id,
    c.name,
    c.level,
    c.experience,
    c.user_id,
    c.hit_points,
    c.max_hit_points,
    c.strength,
    c.dexterity,
    c.constitution,
    c.intelligence,
    c.wisdom,
    c.charisma,
    c.money,
    r.name AS race_name,
    o.name AS origin_name,
    cl.name AS class_name,
    cl.hit_die,
    cl.is_spellcaster,
    l.proficiency_bonus,
    c.created_at
FROM characters c
LEFT JOIN races r ON c.race_id = r.id
LEFT JOIN origins o ON c.origin_id = o.id
LEFT JOIN classes cl ON c.class_id = cl.id
LEFT JOIN levels l ON c.level = l.level
WHERE c.user_id = %s AND c.is_active = TRUE
ORDER BY c.created_at DESC
LIMIT 1
"""

SELECT_CHARACTER = """
SELECT
    c.*,
    c.id AS character_id,
    r.name AS race_name,
    o.name AS origin_name,
    cl.name AS class_name,
    cl.hit_die,
    cl.is_spellcaster,
    l.proficiency_bonus
FROM characters c
LEFT JOIN races r ON c.race_id = r.id
LEFT JOIN origins o ON c.origin_id = o.id
LEFT JOIN classes cl ON c.class_id = cl.id
LEFT JOIN levels l ON c.level = l.level
WHERE c.id = %s AND c.is_active = TRUE
"""

SELECT_CHARACTER_SKILLS = """
SELECT skill_name
FROM character_skills
WHERE character_id = %s
"""

# The item_type tag picks the source table in SQL; columns belonging to the
# other variant come back NULL and are dropped when the row is parsed.
SELECT_CHARACTER_EQUIPMENT = """
SELECT
    ce.item_type,
    ce.item_id,
    ce.is_equipped,
    CASE
        WHEN ce.item_type = 'armor' THEN a.name
        WHEN ce.item_type = 'weapon' THEN w.name
    END AS item_name,
    CASE
        WHEN ce.item_type = 'weapon' THEN w.damage
        ELSE NULL
    END AS damage,
    CASE
        WHEN ce.item_type = 'weapon' THEN w.damage_type
        ELSE NULL
    END AS damage_type,
    CASE
        WHEN ce.item_type = 'armor' THEN a.armor_class
        ELSE NULL
    END AS armor_class
FROM character_equipment ce
LEFT JOIN armor a ON ce.item_type = 'armor' AND ce.item_id = a.id
LEFT JOIN weapons w ON ce.item_type = 'weapon' AND ce.item_id = w.id
WHERE ce.character_id = %s
"""

SELECT_CHARACTER_SPELLS_BRIEF = """
SELECT s.name, s.level, s.damage, s.damage_type
FROM character_spells cs
JOIN spells s ON cs.spell_id = s.id
WHERE cs.character_id = %s
ORDER BY s.level, s.name
"""

SELECT_CHARACTER_SPELLS = """
SELECT s.name, s.level, s.damage, s.damage_type, s.description
FROM character_spells cs
JOIN spells s ON cs.spell_id = s.id
WHERE cs.character_id = %s
ORDER BY s.level, s.name
"""
