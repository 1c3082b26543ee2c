"""
Synthetic hand histories shared by the tests.
Chip totals in each hand add up, so every one of them replays cleanly.
"""

STARS_EXAMPLE = """PokerStars Hand #2310810117: Tournament #10210210, $10+$1 USD Hold'em No Limit - Level V (100/200) - 2025/09/24 17:30:00 ET
Table '102102102 10' 6-max Seat #1 is the button
Seat 1: Player 1 (3500 in chips)
Seat 2: Player 2 (6200 in chips)
Seat 3: Hero (5000 in chips)
Seat 4: Player 4 (4800 in chips)
Seat 5: Player 5 (8000 in chips)
Seat 6: Player 6 (2500 in chips)
Player 2: posts small blind 100
Hero: posts big blind 200
*** HOLE CARDS ***
Dealt to Hero [Ac Jd]
Player 4: folds
Player 5: raises 400 to 600
Player 6: folds
Player 1: folds
Player 2: folds
Hero: calls 400
*** FLOP *** [Ah 7s 2d]
Hero: checks
Player 5: bets 800
Hero: calls 800
*** TURN *** [Ah 7s 2d] [3c]
Hero: checks
Player 5: bets 1600
Hero: calls 1600
*** RIVER *** [Ah 7s 2d 3c] [8s]
Hero: checks
Player 5: checks
*** SHOW DOWN ***
Hero: shows [Ac Jd] (a pair of Aces)
Player 5: mucks hand
Hero collected 6100 from pot
*** SUMMARY ***
Total pot 6100 | Rake 0
Board [Ah 7s 2d 3c 8s]
Seat 1: Player 1 (button) folded before Flop (didn't bet)
Seat 2: Player 2 (small blind) folded before Flop
Seat 3: Hero (big blind) showed [Ac Jd] and won (6100) with a pair of Aces
Seat 4: Player 4 folded before Flop (didn't bet)
Seat 5: Player 5 mucked [Ks Qs]
Seat 6: Player 6 folded before Flop (didn't bet)"""

STARS_CASH_RAKE = """PokerStars Hand #245000000001:  Hold'em No Limit ($0.50/$1.00 USD) - 2025/01/13 10:00:00 ET
Table 'Alcor II' 6-max Seat #2 is the button
Seat 1: Alice ($100 in chips)
Seat 2: Bob ($80.50 in chips)
Seat 3: Carol ($120 in chips)
Seat 4: Hero ($100 in chips)
Carol: posts small blind $0.50
Hero: posts big blind $1
*** HOLE CARDS ***
Dealt to Hero [Qs Qd]
Alice: folds
Bob: raises $2 to $3
Carol: folds
Hero: raises $7 to $10
Bob: calls $7
*** FLOP *** [2c 7h 9s]
Hero: bets $12
Bob: raises $13 to $25
Hero: calls $13
*** TURN *** [2c 7h 9s] [Kd]
Hero: checks
Bob: bets $45.50 and is all-in
Hero: folds
Uncalled bet ($45.50) returned to Bob
Bob collected $69.50 from pot
Bob: doesn't show hand
*** SUMMARY ***
Total pot $70.50 | Rake $1
Board [2c 7h 9s Kd]
Seat 1: Alice folded before Flop (didn't bet)
Seat 2: Bob (button) collected ($69.50)
Seat 3: Carol (small blind) folded before Flop
Seat 4: Hero (big blind) folded on the Turn"""

# Dan returns from a break and posts both blinds; only $2 of the $3 is live
STARS_DEAD_BLIND = """PokerStars Hand #245000000002:  Hold'em No Limit ($1/$2 USD) - 2025/01/13 10:05:00 ET
Table 'Alcor II' 6-max Seat #1 is the button
Seat 1: Alice ($200 in chips)
Seat 2: Bob ($200 in chips)
Seat 3: Carol ($200 in chips)
Seat 4: Dan ($200 in chips)
Bob: posts small blind $1
Carol: posts big blind $2
Dan: posts small & big blinds $3
*** HOLE CARDS ***
Dan: raises $4 to $6
Alice: folds
Bob: folds
Carol: folds
Uncalled bet ($4) returned to Dan
Dan collected $6 from pot
Dan: doesn't show hand
*** SUMMARY ***
Total pot $6 | Rake $0
Seat 1: Alice (button) folded before Flop (didn't bet)
Seat 2: Bob (small blind) folded before Flop
Seat 3: Carol (big blind) folded before Flop
Seat 4: Dan collected ($6)"""

STARS_SIDE_POTS = """PokerStars Hand #300000000001: Tournament #999111, $5+$0.50 USD Hold'em No Limit - Level III (50/100) - 2025/02/01 20:00:00 ET
Table '999111 3' 9-max Seat #1 is the button
Seat 1: Short (500 in chips)
Seat 2: Mid (1500 in chips)
Seat 3: Big (4000 in chips)
Short: posts the ante 10
Mid: posts the ante 10
Big: posts the ante 10
Mid: posts small blind 50
Big: posts big blind 100
*** HOLE CARDS ***
Dealt to Big [Ah Ad]
Short: raises 390 to 490 and is all-in
Mid: raises 1000 to 1490 and is all-in
Big: calls 1390
*** FLOP *** [2c 7d 9h]
*** TURN *** [2c 7d 9h] [Js]
*** RIVER *** [2c 7d 9h Js] [3s]
*** SHOW DOWN ***
Short: shows [Kc Kd] (a pair of Kings)
Mid: shows [Qc Qd] (a pair of Queens)
Big: shows [Ah Ad] (a pair of Aces)
Big collected 2000 from side pot
Big collected 1500 from main pot
*** SUMMARY ***
Total pot 3500 Main pot 1500. Side pot 2000. | Rake 0
Board [2c 7d 9h Js 3s]
Seat 1: Short (button) showed [Kc Kd] and lost with a pair of Kings
Seat 2: Mid (small blind) showed [Qc Qd] and lost with a pair of Queens
Seat 3: Big (big blind) showed [Ah Ad] and won (3500) with a pair of Aces"""

GG_TOURNAMENT = """Poker Hand #TM5148170724: Tournament #238314829, Bounty Hunters Mini Encore $5.40 Hold'em No Limit - Level15(1,500/3,000) - 2025/10/26 20:21:23
Table '119' 8-max Seat #4 is the button
Seat 1: a221e335 (145,068 in chips)
Seat 2: Hero (44,867 in chips)
Seat 3: cd311949 (46,489 in chips)
Seat 4: 7b045224 (245,366 in chips)
Seat 5: a9957d2b (48,054 in chips)
Seat 6: 4d89fc07 (82,819 in chips)
Seat 7: 57b0324a (58,388 in chips)
Seat 8: b33072e1 (81,484 in chips)
Hero: posts the ante 450
57b0324a: posts the ante 450
7b045224: posts the ante 450
a221e335: posts the ante 450
b33072e1: posts the ante 450
4d89fc07: posts the ante 450
a9957d2b: posts the ante 450
cd311949: posts the ante 450
a9957d2b: posts small blind 1,500
4d89fc07: posts big blind 3,000
*** HOLE CARDS ***
Dealt to a221e335
Dealt to Hero [As Qc]
Dealt to cd311949
Dealt to 7b045224
Dealt to a9957d2b
Dealt to 4d89fc07
Dealt to 57b0324a
Dealt to b33072e1
57b0324a: folds
b33072e1: raises 6,000 to 9,000
a221e335: folds
Hero: raises 35,417 to 44,417 and is all-in
cd311949: folds
7b045224: folds
a9957d2b: folds
4d89fc07: folds
b33072e1: calls 35,417
Hero: shows [As Qc]
b33072e1: shows [Ah Ac]
*** FLOP *** [3d Qd 7d]
*** TURN *** [3d Qd 7d] [4d]
*** RIVER *** [3d Qd 7d 4d] [8h]
*** SHOWDOWN ***
b33072e1 collected 96,934 from pot
*** SUMMARY ***
Total pot 96,934 | Rake 0 | Jackpot 0 | Bingo 0 | Fortune 0 | Tax 0
Board [3d Qd 7d 4d 8h]
Seat 1: a221e335 folded before Flop
Seat 2: Hero showed [As Qc] and lost with a pair of Queens
Seat 3: cd311949 folded before Flop
Seat 4: 7b045224 (button) folded before Flop
Seat 5: a9957d2b (small blind) folded before Flop
Seat 6: 4d89fc07 (big blind) folded before Flop
Seat 7: 57b0324a folded before Flop
Seat 8: b33072e1 showed [Ah Ac] and won (96,934) with a pair of Aces"""

GG_CASH_FEES = """Poker Hand #RC1000000001: Hold'em No Limit ($0.05/$0.10) - 2025/03/02 18:00:00
Table 'NLHGold5' 6-max Seat #1 is the button
Seat 1: Hero ($10.00 in chips)
Seat 2: f00dcafe ($10.00 in chips)
Seat 3: beefbeef ($10.00 in chips)
f00dcafe: posts small blind $0.05
beefbeef: posts big blind $0.10
*** HOLE CARDS ***
Dealt to Hero [Kh Kc]
Hero: raises $0.15 to $0.25
f00dcafe: folds
beefbeef: calls $0.15
*** FLOP *** [8s 5d 2c]
beefbeef: checks
Hero: bets $0.30
beefbeef: calls $0.30
*** TURN *** [8s 5d 2c] [Jh]
beefbeef: checks
Hero: checks
*** RIVER *** [8s 5d 2c Jh] [4s]
beefbeef: checks
Hero: checks
*** SHOWDOWN ***
Hero: shows [Kh Kc]
beefbeef: mucks hand
Hero collected $1.12 from pot
*** SUMMARY ***
Total pot $1.15 | Rake $0.02 | Jackpot $0.01 | Bingo $0 | Fortune $0 | Tax $0
Board [8s 5d 2c Jh 4s]
Seat 1: Hero (button) showed [Kh Kc] and won ($1.12)
Seat 2: f00dcafe (small blind) folded before Flop
Seat 3: beefbeef (big blind) mucked"""

PARTY_TOURNAMENT = """***** Hand History for Game 21775316455 *****
100/200 Tourney Texas Holdem Game Table (NL) (Tournament #98765) - Mon Jan 13 20:00:00 CET 2025
Table Tourney (98765) Table #3 (Real Money)
Seat 1 is the button
Total number of players : 4/6
Seat 1: Alpha ( 5000 )
Seat 2: Bravo ( 3000 )
Seat 3: Charlie ( 4000 )
Seat 4: Hero ( 6000 )
Alpha posts ante [25]
Bravo posts ante [25]
Charlie posts ante [25]
Hero posts ante [25]
Bravo posts small blind [100].
Charlie posts big blind [200].
** Dealing down cards **
Dealt to Hero [  Ah Kd ]
Hero raises [600]
Alpha folds
Bravo folds
Charlie calls [400]
** Dealing Flop ** [ Kc, 7h, 2s ]
Charlie is all-In  [3375]
Hero calls [3375]
** Dealing Turn ** [ 3d ]
** Dealing River ** [ 9c ]
Charlie shows [ Qs, Qd ]a pair of Queens.
Hero shows [ Ah, Kd ]a pair of Kings.
Hero wins 8150 chips from the main pot with a pair of Kings."""

IGNITION_CASH = """Ignition Hand #4321098765 TBL#12345678 HOLDEM No Limit - 2025-01-13 10:00:00
Seat 1: Small Blind ($10.00 in chips)
Seat 2: Big Blind ($10.00 in chips)
Seat 3: UTG ($10.00 in chips)
Seat 4: Dealer [ME] ($10.00 in chips)
Dealer : Set dealer [4]
Small Blind : Small Blind $0.05
Big Blind : Big blind $0.10
*** HOLE CARDS ***
Small Blind : Card dealt to a spot [7c 2d]
Big Blind : Card dealt to a spot [Jh Js]
UTG : Card dealt to a spot [9s 4c]
Dealer [ME] : Card dealt to a spot [Ah Kd]
UTG : Folds
Dealer [ME] : Raises $0.30 to $0.30
Small Blind : Folds
Big Blind : Call $0.20
*** FLOP *** [Qs 4d 5h]
Big Blind : Checks
Dealer [ME] : Bets $0.40
Big Blind : Raises $1.20 to $1.20
Dealer [ME] : Folds
Big Blind : Return uncalled portion of bet $0.80
Big Blind : Does not show [Jh Js] (One pair)
Big Blind : Hand result $1.43
*** SUMMARY ***
Total Pot($1.45)
Board [Qs 4d 5h]
Seat+1: Small Blind Folded before the FLOP
Seat+2: Big Blind $1.43 [Does not show]
Seat+3: UTG Folded before the FLOP
Seat+4: Dealer Folded on the FLOP"""

POKER888_CASH = """#Game No : 1234567890
***** 888poker Hand History for Game 1234567890 *****
$0.01/$0.02 Blinds No Limit Holdem - *** 13 01 2025 10:00:00
Table Paris 6 Max (Real Money)
Seat 3 is the button
Total number of players : 3
Seat 1: Player1 ( $2.00 )
Seat 3: Hero ( $2.50 )
Seat 5: Player2 ( $1.80 )
Player2 posts small blind [$0.01]
Player1 posts big blind [$0.02]
** Dealing down cards **
Dealt to Hero [ Ah, Kd ]
Hero raises [$0.06]
Player2 calls [$0.05]
Player1 folds
** Dealing flop ** [ Qs, 4d, 5h ]
Player2 checks
Hero bets [$0.08]
Player2 folds
** Summary **
Hero collected [ $0.22 ]"""

POKER888_TOURNAMENT = """#Game No : 987654321
***** 888poker Hand History for Game 987654321 *****
500/1.000 Blinds No Limit Holdem - *** 14 01 2025 20:00:00
Tournament #55555 $10 + $1 - Table #4 9 Max (Real Money)
Seat 2 is the button
Total number of players : 3
Seat 1: Alpha ( 10.000 )
Seat 2: Bravo ( 12.500 )
Seat 3: Hero ( 8.000 )
Alpha posts ante [100]
Bravo posts ante [100]
Hero posts ante [100]
Hero posts small blind [500]
Alpha posts big blind [1.000]
** Dealing down cards **
Dealt to Hero [ 9c, 9d ]
Bravo folds
Hero raises [2.500]
Alpha calls [2.000]
** Dealing flop ** [ 2h, 7c, Jd ]
Hero bets [3.000]
Alpha folds
** Summary **
Hero collected [ 9.300 ]
Alpha did not show his hand"""
