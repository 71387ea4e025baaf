"""The game's animation and particle sprite sets, registered with a resource manager."""

from __future__ import annotations

from typing import NamedTuple, Sequence

from .resources import AnimationResource, ResourceManager

_PLAYER = "Asset/Animations/Player/"
_ENEMY = "Asset/Animations/Enemy/"
_SOULMASTER = "Asset/Animations/Enemy/SoulMaster/"
_NIGHTMARE = "Asset/Animations/Enemy/NightMare/"
_UI = "Asset/Animations/UI/"
_ANIM = "Asset/Animations/"
_PARTICLES = "Asset/Particles/"


class _Frames(NamedTuple):
    """Numbered frames in a folder, all of one size."""

    name: str
    path: str
    width: int
    height: int
    count: int

    def load(self, manager: ResourceManager) -> AnimationResource:
        return manager.load_frames(self.name, self.path, self.width, self.height, self.count)


class _Sized(NamedTuple):
    """Numbered frames in a folder, each with its own size."""

    name: str
    path: str
    sizes: Sequence[tuple[int, int]]

    def load(self, manager: ResourceManager) -> AnimationResource:
        return manager.load_sized_frames(self.name, self.path, self.sizes)


class _Sheet(NamedTuple):
    """A sprite sheet cut into frames."""

    name: str
    path: str
    width: int
    height: int
    count: int
    rows: int
    columns: int

    def load(self, manager: ResourceManager) -> AnimationResource:
        return manager.load_sheet(
            self.name, self.path, self.width, self.height, self.count, self.rows, self.columns
        )


ANIMATIONS = (
    # Player
    _Frames("player_idle", _PLAYER + "Idle/", 139, 164, 6),
    _Frames("player_walk", _PLAYER + "Walk/", 124, 164, 8),
    _Sized("player_walkstart", _PLAYER + "WalkStart/",
           [(149, 167), (149, 129), (146, 129), (148, 134), (152, 146), (144, 156)]),
    _Sized("player_walkend", _PLAYER + "WalkEnd/", [(147, 160), (137, 160), (147, 160)]),
    _Sized("player_rush", _PLAYER + "Rush/",
           [(133, 130), (135, 118), (137, 118), (132, 114), (140, 108), (137, 117),
            (143, 119), (138, 116), (137, 114)]),
    _Sized("player_turn", _PLAYER + "Turn/", [(141, 162), (104, 178), (141, 162)]),
    _Sized("player_jump", _PLAYER + "Jump/",
           [(124, 160), (120, 172), (116, 172), (104, 168), (108, 168), (143, 163)]),
    _Sized("player_rushjump", _PLAYER + "RushJump/",
           [(171, 115), (204, 144), (198, 180), (186, 183), (186, 192), (195, 195),
            (198, 183), (124, 182), (140, 171), (146, 168), (198, 180), (104, 168),
            (108, 168), (143, 163)]),
    _Frames("player_fall", _PLAYER + "Fall/", 132, 168, 4),
    _Frames("player_softland", _PLAYER + "SoftLand/", 152, 166, 3),
    _Frames("player_hardland", _PLAYER + "HardLand/", 164, 152, 4),
    _Sized("player_attack_0", _PLAYER + "Attack_0/",
           [(122, 162), (364, 183), (321, 178), (300, 178), (174, 144)]),
    _Sized("player_attack_1", _PLAYER + "Attack_1/",
           [(122, 162), (315, 156), (321, 159), (321, 159), (174, 144)]),
    _Sized("player_attackup", _PLAYER + "AttackUp/",
           [(160, 188), (184, 389), (184, 222), (184, 269), (152, 168)]),
    _Sized("player_attackdown", _PLAYER + "AttackDown/",
           [(111, 193), (103, 196), (250, 263), (225, 225), (192, 143)]),
    _Sized("player_rushattack", _PLAYER + "RushAttack/",
           [(166, 156), (155, 176), (180, 176), (300, 164), (339, 164), (400, 120),
            (400, 121), (109, 121), (174, 148)]),
    _Sized("player_attackbounce", _PLAYER + "AttackBounce/",
           [(160, 160), (170, 156), (170, 158), (176, 160), (171, 157), (163, 160),
            (144, 153), (114, 156), (139, 145), (176, 138), (183, 114)]),
    _Sized("player_evade", _PLAYER + "Evade/",
           [(141, 166)] * 3 + [(148, 160)] * 3 + [(152, 166)]),
    _Sized("player_dash", _PLAYER + "Dash/",
           [(210, 147), (210, 148), (192, 131), (192, 131), (182, 131), (182, 131),
            (184, 131), (225, 160), (225, 160)]),
    _Sized("player_airdash", _PLAYER + "AirDash/",
           [(182, 112), (148, 140), (148, 146), (178, 113), (139, 145), (176, 138),
            (185, 131), (172, 113)]),
    _Sized("player_cure", _PLAYER + "Cure/",
           [(343, 252), (565, 570), (580, 490), (450, 495), (451, 495), (451, 216),
            (155, 250), (114, 225), (433, 360), (444, 368), (963, 660), (1040, 600),
            (1035, 600), (1025, 520)]),
    _Frames("player_hurt", _PLAYER + "Hurt/", 228, 172, 6),
    _Sized("player_throw", _PLAYER + "Throw/",
           [(127, 170)] * 4 + [(104, 142)] * 4 + [(177, 163)] * 4),
    _Sized("player_grab", _PLAYER + "Grab/",
           [(140, 180), (141, 198), (142, 194), (138, 196), (170, 134), (160, 110),
            (170, 120), (184, 132), (174, 166)]),
    _Frames("player__closeskill", _PLAYER + "_CloseDisSkill/", 179, 152, 3),
    _Frames("player_closeskill", _PLAYER + "CloseDisSkill/", 179, 152, 7),
    _Sized("player_remoteskill", _PLAYER + "RemoteDisSkill/",
           [(215, 162)] * 8 + [(118, 141)] * 6 + [(185, 142)] * 6),
    _Frames("player_lowhealth", _PLAYER + "LowHealth/", 164, 164, 6),
    _Frames("player_die", _PLAYER + "Die/", 146, 119, 4),
    _Sheet("player_sitdown", _PLAYER + "SitDown.png", 170, 159, 1, 1, 1),
    _Sheet("player_standup", _PLAYER + "StandUp.png", 177, 186, 1, 1, 1),
    _Sheet("player_lookdown", _PLAYER + "LookDown.png", 142, 169, 1, 1, 1),
    _Sheet("player_lookup", _PLAYER + "LookUp.png", 149, 122, 1, 1, 1),
    _Frames("player_leave", _PLAYER + "Leave/", 304, 199, 8),
    _Sheet("player_wall", _PLAYER + "Wall.png", 100, 175, 1, 1, 1),
    _Frames("player_defend", _PLAYER + "Defend/", 158, 120, 4),
    _Frames("player_defendstart", _PLAYER + "DefendStart/", 150, 172, 3),
    _Frames("player_defendend", _PLAYER + "DefendEnd/", 92, 170, 2),
    _Sized("player_defendattack", _PLAYER + "DefendAttack/",
           [(201, 190)] * 3 + [(455, 320), (455, 300), (230, 147), (117, 147)]),
    _Sheet("player_scare", _PLAYER + "Scare.png", 164, 164, 1, 1, 1),
    # Effects
    _Frames("effect_dash", _PLAYER + "DashEffect/", 342, 433, 5),
    _Sheet("effect_dash_", _PLAYER + "DashEffect_.png", 1280, 856, 6, 3, 2),
    _Frames("effect_hurt", _PLAYER + "HurtEffect/", 1400, 470, 4),
    _Frames("effect_hurt_", _PLAYER + "HurtEffect_/", 308, 270, 7),
    _Frames("effect_wetland", _PLAYER + "WetLandEffect/", 115, 34, 5),
    _Sheet("effect_wetwalk", _PLAYER + "WetWalkEffect/whitesplash.png", 250, 50, 5, 1, 5),
    _Sheet("effect_darthit", _PLAYER + "DartHitEffect.png", 348, 215, 4, 1, 4),
    _Sized("effect_nailhit", _PLAYER + "NailHitEffect/", [(425, 240), (495, 290), (568, 283)]),
    _Sized("effect_attack", _PLAYER + "AttackEffect/",
           [(630, 52), (532, 55), (338, 34), (138, 17)]),
    _Frames("effect_attack_", _PLAYER + "AttackEffect_/", 375, 160, 3),
    _Sized("effect_counter", _PLAYER + "CounterEffect/", [(209, 167), (397, 287), (445, 260)]),
    _Frames("effect_closeskill", _PLAYER + "CloseSkillEffect/", 425, 450, 9),
    _Frames("effect_throw", _PLAYER + "ThrowEffect/", 278, 133, 3),
    _Frames("effect_remoteskill", _PLAYER + "RemoteSkillEffect/", 900, 40, 6),
    _Sized("effect_geo", _PLAYER + "GeoEffect/", [(50, 24), (39, 32), (81, 26), (100, 30)]),
    _Frames("effect_sit", _PLAYER + "SitEffect/", 1059, 500, 4),
    _Frames("effect_leave", _PLAYER + "LeaveEffect/", 440, 115, 7),
    _Sized("effect_death", _ENEMY + "DeathHurtEffect/", [(300, 250), (450, 375), (450, 375)]),
    _Frames("effect_soulmaster_quake", _SOULMASTER + "QuakeEffect/", 750, 315, 5),
    _Sheet("effect_soulmaster_quake_", _SOULMASTER + "QuakeEffect_.png", 900, 600, 6, 1, 6),
    _Sized("effect_soulmaster_teleport", _SOULMASTER + "TeleportEffect/",
           [(385, 425), (695, 1855), (745, 2470), (740, 2150)]),
    _Sheet("effect_soulorb", _ENEMY + "SoulOrb.png", 518, 60, 7, 1, 7),
    _Sheet("effect_puff", _ENEMY + "OrangePuff.png", 738, 77, 9, 1, 9),
    _Frames("effect_splat", _ENEMY + "DeathSplat/", 430, 345, 7),
    _Frames("effect_soulburst", _ENEMY + "SoulBurst/", 222, 222, 4),
    _Frames("effect_soulspawn", _ENEMY + "SoulSpawn/", 222, 222, 4),
    _Frames("effect_pillar", _NIGHTMARE + "Pillar/", 203, 710, 6),
    _Sheet("effect_flame_particle", _NIGHTMARE + "Grimm_flame_ball_particle.png", 51, 17, 3, 1, 3),
    _Sized("effect_nightmare_cast", _NIGHTMARE + "CastEffect/",
           [(154, 170), (278, 742), (298, 988), (296, 860)]),
    _Frames("effect_fireball", _NIGHTMARE + "FireBall/", 75, 75, 8),
    # UI
    _Frames("inventory_bloodidle", _UI + "BloodIdle/", 33, 49, 6),
    _Frames("inventory_bloodload", _UI + "BloodLoad/", 33, 49, 4),
    _Sized("inventory_bloodminus", _UI + "BloodMinus/",
           [(68, 136), (65, 140), (67, 131), (114, 128), (108, 128), (118, 112), (33, 47)]),
    _Sized("inventory_silk", _UI + "Silk/",
           [(19, 75), (19, 75), (23, 71), (21, 68), (28, 91), (25, 47), (16, 39)]),
    _Sized("inventory_soul", _UI + "Soul/",
           [(47, 48), (47, 48), (60, 57), (72, 67), (120, 120), (77, 77)]),
    _Frames("menu_warning", _UI + "Warning/", 767, 64, 7),
    # NPC
    _Sheet("brumm", _ANIM + "Brumm - atlas0 #392009.png", 1352, 472, 11, 2, 6),
    # Enemy
    _Frames("fly_idle", _ENEMY + "Fly/Idle/", 120, 135, 5),
    _Frames("fly_turn", _ENEMY + "Fly/Turn/", 120, 151, 2),
    _Frames("fly_die", _ENEMY + "Fly/Die/", 142, 108, 3),
    _Frames("fly_startchase", _ENEMY + "Fly/StartChase/", 149, 151, 4),
    _Frames("fly_chase", _ENEMY + "Fly/Chase/", 146, 134, 4),
    _Frames("bug_walk", _ENEMY + "Bug/Walk/", 90, 84, 4),
    _Frames("bug_turn", _ENEMY + "Bug/Turn/", 87, 82, 3),
    _Frames("bug_appear", _ENEMY + "Bug/Appear/", 109, 110, 5),
    _Frames("bug_bury", _ENEMY + "Bug/Bury/", 106, 98, 5),
    _Frames("bug_die", _ENEMY + "Bug/Death/", 86, 84, 6),
    _Frames("soulmaster_idle", _SOULMASTER + "Idle/", 334, 285, 6),
    _Frames("soulmaster_turn", _SOULMASTER + "Turn/", 334, 285, 2),
    _Frames("soulmaster_teleport", _SOULMASTER + "Teleport/", 405, 466, 7),
    _Frames("soulmaster_startsummon", _SOULMASTER + "StartSummon/", 404, 288, 3),
    _Frames("soulmaster_summon", _SOULMASTER + "Summon/", 405, 290, 4),
    _Sheet("soulmaster_startquake", _SOULMASTER + "StartQuake.png", 1682, 614, 8, 2, 4),
    _Sheet("soulmaster_quake", _SOULMASTER + "Quake.png", 199, 356, 1, 1, 1),
    _Frames("soulmaster_startdash", _SOULMASTER + "StartDash/", 384, 305, 6),
    _Frames("soulmaster_dash", _SOULMASTER + "Dash/", 351, 275, 3),
    _Frames("soulmaster_startstun", _SOULMASTER + "StartStun/", 293, 270, 10),
    _Frames("soulmaster_stun", _SOULMASTER + "Stun/", 125, 262, 6),
    _Frames("soulmaster_transition", _SOULMASTER + "Transition/", 180, 246, 3),
    _Sized("soulmaster_die", _SOULMASTER + "Die/", [(226, 146)] * 3 + [(260, 135)] * 4),
    _Frames("nightmare_idle", _NIGHTMARE + "Idle/", 161, 320, 12),
    _Frames("nightmare_bow", _NIGHTMARE + "Bow/", 200, 324, 7),
    _Frames("nightmare_teleport", _NIGHTMARE + "Teleport/", 188, 337, 7),
    _Frames("nightmare_startspike", _NIGHTMARE + "StartSpike/", 274, 324, 7),
    _Frames("nightmare_spike", _NIGHTMARE + "Spike/", 274, 324, 3),
    _Sized("nightmare_startballoon", _NIGHTMARE + "StartBalloon/", [(196, 239), (321, 352)]),
    _Frames("nightmare_balloon", _NIGHTMARE + "Balloon/", 321, 352, 3),
    _Sized("nightmare_cast", _NIGHTMARE + "Cast/", [(204, 336)] * 4 + [(341, 316)] * 4),
    _Frames("nightmare_startairdash", _NIGHTMARE + "StartAirDash/", 217, 345, 7),
    _Frames("nightmare_airdash", _NIGHTMARE + "AirDash/", 137, 336, 3),
    _Frames("nightmare_startdash", _NIGHTMARE + "StartDash/", 330, 246, 4),
    _Frames("nightmare_dash", _NIGHTMARE + "Dash/", 569, 208, 4),
    _Frames("nightmare_startslash", _NIGHTMARE + "StartSlash/", 226, 296, 4),
    _Sized("nightmare_slash", _NIGHTMARE + "Slash/",
           [(506, 280), (418, 294), (495, 274)] + [(380, 306)] * 3),
    _Frames("nightmare_startuppercut", _NIGHTMARE + "StartUpperCut/", 330, 248, 3),
    _Frames("nightmare_uppercut", _NIGHTMARE + "UpperCut/", 254, 500, 2),
    _Sized("nightmare_stun", _NIGHTMARE + "Stun/",
           [(184, 286)] * 2 + [(386, 390)] * 3 + [(301, 279)] * 2),
    _Frames("nightmare_fly", _NIGHTMARE + "Fly/", 113, 126, 3),
    _Frames("nightmare_die", _NIGHTMARE + "Die/", 189, 282, 3),
    _Frames("nightmare_scream", _NIGHTMARE + "Scream/", 308, 262, 3),
    _Frames("nightmare_fingerstretch", _NIGHTMARE + "FingerStretch/", 90, 97, 6),
    _Sized("nightmare_fingerclick", _NIGHTMARE + "FingerClick/",
           [(90, 97)] * 2 + [(111, 86)] * 3),
    _Frames("nightmare_stand", _NIGHTMARE + "Stand/", 163, 320, 12),
    # Water
    _Frames("water_fountain", _ANIM + "WaterFalls/", 31, 188, 10),
    _Frames("water_top", _ANIM + "WaterTop/", 343, 48, 9),
    _Frames("rain_land", _ANIM + "RainLand/", 120, 20, 6),
    # Others
    _Frames("pointer", _ANIM + "Pointer/", 43, 31, 11),
    _Frames("menuhit", _ANIM + "MenuHit/", 350, 51, 6),
    _Frames("dart", _ANIM + "Dart/", 71, 74, 5),
    _Frames("spike_ready", _ANIM + "Spike/Ready/", 58, 136, 3),
    _Frames("spike_start", _ANIM + "Spike/Start/", 64, 352, 4),
    _Frames("spike_idle", _ANIM + "Spike/Idle/", 57, 685, 2),
    _Frames("spike_end", _ANIM + "Spike/End/", 73, 524, 5),
    _Sheet("flame_torch", _ANIM + "grimm_particle_flame.png", 738, 82, 9, 1, 9),
    _Frames("glow_torch", _ANIM + "TorchGlow/", 240, 240, 3),
    _Frames("firebat_idle", _ANIM + "FireBat/Idle/", 163, 136, 5),
    _Frames("firebat_destroy", _ANIM + "FireBat/Destroy/", 163, 136, 3),
)

PARTICLES = (
    _Sheet("rain_bg", _PARTICLES + "rain_particle.png", 12, 1200, 3, 3, 1),
    _Sheet("rain_bg_", _PARTICLES + "rain_particle_.png", 16, 1000, 3, 3, 1),
    _Sheet("particle_heal", _PARTICLES + "heal_particle.png", 30, 80, 3, 3, 1),
    _Sheet("particle_rock", _PARTICLES + "particles_barrel.png", 43, 376, 6, 6, 1),
    _Sheet("menu_radiant_bottom", _PARTICLES + "gg_menu_radiant_0000_1.png", 15, 15, 1, 1, 1),
    _Sheet("menu_radiant_top", _PARTICLES + "gg_menu_radiant_0000_2.png", 15, 15, 1, 1, 1),
    _Sheet("menu_smoke", _PARTICLES + "wispy_smoke_particle_abyss.png", 306, 1536, 5, 5, 1),
    _Sheet("menu_ss_particle", _PARTICLES + "ember_particle.png", 90, 90, 1, 1, 1),
    _Sheet("particle_silk", _PARTICLES + "web_particle.png", 46, 183, 4, 4, 1),
    _Sheet("particle_smoke", _PARTICLES + "hot_spring_smoke.png", 98, 87, 1, 1, 1),
    _Sheet("particle_fragment", _PARTICLES + "rock_particle.png", 33, 88, 4, 4, 1),
    _Sheet("particle_quake", _PARTICLES + "quake_particle.png", 36, 144, 4, 4, 1),
    _Sheet("particle_spatter", _PARTICLES + "spatter_white.png", 31, 31, 1, 1, 1),
    _Sheet("particle_fire", _PARTICLES + "ember_particle_round.png", 28, 27, 1, 1, 1),
    _Sheet("particle_grimm_smoke", _PARTICLES + "grimm_smoke.png", 204, 1024, 5, 5, 1),
    _Sheet("particle_flame_i", _PARTICLES + "wispy_flame_particle_i.png", 102, 510, 5, 5, 1),
    _Sheet("particle_flame_o", _PARTICLES + "wispy_flame_particle_o.png", 204, 1020, 5, 5, 1),
)


def _register(manager: ResourceManager, entries) -> dict[str, AnimationResource]:
    return {entry.name: entry.load(manager) for entry in entries}


def register_animations(manager: ResourceManager) -> dict[str, AnimationResource]:
    """Load every character, enemy, effect and UI animation; return them by name."""
    return _register(manager, ANIMATIONS)


def register_particles(manager: ResourceManager) -> dict[str, AnimationResource]:
    """Load every particle sprite sheet; return them by name."""
    return _register(manager, PARTICLES)